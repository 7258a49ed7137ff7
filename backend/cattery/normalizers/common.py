def timestamps(item):
    return {
        "created_at": item.created_at.isoformat() if item.created_at else None,
        "updated_at": item.updated_at,
    }
