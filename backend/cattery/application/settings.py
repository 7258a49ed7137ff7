# cattery/application/settings.py
import json
from typing import Any, Dict, List, Optional, Tuple

from cattery.extensions import db
from cattery.models.site_setting import SiteSetting
from cattery.domain.exceptions import NotFound, ValidationFailure
from cattery.domain.invariants.fields import optional_text
from cattery.domain.invariants.setting import clean_setting, setting_type
from cattery.utils import clock
from cattery.utils.audit import log_action
from cattery.utils.transaction import transactional

# request field -> (setting key, description)
SOCIAL_MEDIA_KEYS: Dict[str, Tuple[str, str]] = {
    "facebook": ("facebook_url", "Facebook page URL"),
    "instagram": ("instagram_url", "Instagram profile URL"),
    "tiktok": ("tiktok_url", "TikTok profile URL"),
}

LOCATION_KEYS: Dict[str, Tuple[str, str]] = {
    "address": ("establishment_address", "Physical address of the establishment"),
    "coordinates": ("establishment_coordinates", "GPS coordinates (lat, lng) as JSON"),
    "google_maps_url": ("google_maps_url", "Custom Google Maps URL"),
    "apple_maps_url": ("apple_maps_url", "Custom Apple Maps URL"),
    "display_name": ("location_display_name", "Display name for the location"),
}

DEFAULT_SETTINGS = (
    {
        "key": "facebook_url",
        "value": "https://www.facebook.com/profile.php?id=61561853557367",
        "type": "social_media",
        "description": "Facebook page URL",
    },
    {
        "key": "instagram_url",
        "value": "https://instagram.com/radanovpride",
        "type": "social_media",
        "description": "Instagram profile URL",
    },
    {
        "key": "tiktok_url",
        "value": "https://www.tiktok.com/@radanovpridemainecoon",
        "type": "social_media",
        "description": "TikTok profile URL",
    },
)


def list_settings() -> List[SiteSetting]:
    return SiteSetting.query.order_by(SiteSetting.key.asc()).all()


def list_settings_by_type(type_: str) -> List[SiteSetting]:
    setting_type("type", type_)
    return (
        SiteSetting.query
        .filter_by(type=type_)
        .order_by(SiteSetting.key.asc())
        .all()
    )


def find_setting(key: str) -> Optional[SiteSetting]:
    return SiteSetting.query.filter_by(key=key).first()


def get_setting(key: str) -> SiteSetting:
    setting = find_setting(key)
    if setting is None:
        raise NotFound(f"Setting '{key}' not found")
    return setting


def grouped_settings(type_: str) -> Dict[str, Any]:
    """
    key -> value map for one setting type. Values holding JSON are
    decoded, anything else is returned as stored.
    """
    grouped: Dict[str, Any] = {}
    for setting in list_settings_by_type(type_):
        try:
            grouped[setting.key] = json.loads(setting.value)
        except ValueError:
            grouped[setting.key] = setting.value
    return grouped


def _write(key: str, value: str, type_: str, description: Optional[str], now: int) -> SiteSetting:
    setting = find_setting(key)
    created = setting is None

    if created:
        setting = SiteSetting()
        setting.key = key
        db.session.add(setting)

    setting.value = value
    setting.type = type_
    setting.description = description
    setting.touch(now)
    db.session.flush()

    log_action(
        action="setting.create" if created else "setting.update",
        entity_type="setting",
        entity_id=setting.id,
        payload={"key": key},
    )
    return setting


def upsert_setting(data: Any) -> SiteSetting:
    """
    Create a setting, or overwrite value/type/description of an existing key.
    """
    fields = clean_setting(data)
    now = clock.now_ms()

    with transactional():
        setting = _write(
            fields["key"], fields["value"], fields["type"], fields.get("description"), now
        )

    return setting


def _update_known_keys(
    data: Any,
    *,
    known: Dict[str, Tuple[str, str]],
    type_: str,
) -> List[str]:
    if not isinstance(data, dict):
        raise ValidationFailure("Payload must be a JSON object")

    provided = {
        field: optional_text(field, data[field])
        for field in known
        if data.get(field) is not None
    }

    now = clock.now_ms()
    updated: List[str] = []

    with transactional():
        for field, value in provided.items():
            key, description = known[field]
            existing = find_setting(key)
            _write(
                key,
                value,
                type_,
                existing.description if existing else description,
                now,
            )
            updated.append(field)

    return updated


def update_social_media(data: Any) -> List[str]:
    return _update_known_keys(data, known=SOCIAL_MEDIA_KEYS, type_="social_media")


def update_location(data: Any) -> List[str]:
    return _update_known_keys(data, known=LOCATION_KEYS, type_="location")


def delete_setting(setting_id: str) -> None:
    with transactional():
        setting = db.session.get(SiteSetting, setting_id)
        if setting is None:
            raise NotFound("Setting not found")

        db.session.delete(setting)
        log_action(
            action="setting.delete",
            entity_type="setting",
            entity_id=setting_id,
            payload={"key": setting.key},
        )


def initialize_default_settings() -> List[SiteSetting]:
    """
    Insert the default settings whose keys do not exist yet.
    Existing values are never overwritten.
    """
    now = clock.now_ms()
    inserted: List[SiteSetting] = []

    with transactional():
        for default in DEFAULT_SETTINGS:
            if find_setting(default["key"]) is None:
                inserted.append(
                    _write(
                        default["key"],
                        default["value"],
                        default["type"],
                        default["description"],
                        now,
                    )
                )

    return inserted
