"""Fixed output schema for roster extraction."""

INDEX_FIELD = "序号"
PLATFORM_FIELD = "平台"
NICKNAME_FIELD = "昵称"
LINK_FIELD = "链接"
ACCOUNT_TYPE_FIELD = "账号类型"
FOLLOWERS_FIELD = "粉丝数（W）"
REGION_FIELD = "国家/地区"

# Column order of every exported sheet.
FIELD_SCHEMA: tuple[str, ...] = (
    INDEX_FIELD,
    PLATFORM_FIELD,
    NICKNAME_FIELD,
    LINK_FIELD,
    ACCOUNT_TYPE_FIELD,
    FOLLOWERS_FIELD,
    REGION_FIELD,
)


def quoted_field_list(schema: tuple[str, ...] = FIELD_SCHEMA) -> str:
    """Render field names as a comma-separated list of JSON strings."""
    return ", ".join(f'"{name}"' for name in schema)
