from typing import Any, Dict

from portfolio.domain.fields import Field, PatchSchema, as_bool, as_optional_string, as_string
from portfolio.extensions import db
from portfolio.models import DEFAULT_SETTINGS, Setting
from portfolio.utils.audit import log_action
from portfolio.utils.transaction import transactional

SETTING_SCHEMA = PatchSchema(
    label="Settings",
    fields=(
        Field("theme", "theme", as_string),
        Field("siteTitle", "site_title", as_string),
        Field("showPortrait", "show_portrait", as_bool),
        Field("resumeUrl", "resume_url", as_optional_string),
        Field("globalFontFamily", "global_font_family", as_string),
    ),
)


def _new_setting() -> Setting:
    setting = Setting()
    for field, value in DEFAULT_SETTINGS.items():
        setattr(setting, field, value)
    return setting


def get_settings() -> Setting:
    """Return the site settings row, creating it from defaults on first read."""
    setting = Setting.query.order_by(Setting.created_at.asc()).first()
    if setting:
        return setting

    setting = _new_setting()
    with transactional():
        db.session.add(setting)

    return setting


def update_settings(data: Dict[str, Any]) -> Setting:
    values = SETTING_SCHEMA.parse(data)

    setting = Setting.query.order_by(Setting.created_at.asc()).first()
    if setting is None:
        setting = _new_setting()
        db.session.add(setting)

    changed_fields: list[str] = []

    with transactional():
        for field, value in values.items():
            if getattr(setting, field) != value:
                setattr(setting, field, value)
                changed_fields.append(field)

        db.session.flush()

        log_action(
            action="settings.update",
            entity_type="setting",
            entity_id=setting.id,
            payload={"fields": changed_fields},
        )

    return setting
