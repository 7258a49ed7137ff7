def normalize_setting(setting):
    return {
        "id": setting.id,
        "key": setting.key,
        "value": setting.value,
        "type": setting.type,
        "description": setting.description,
        "updated_at": setting.updated_at,
    }
