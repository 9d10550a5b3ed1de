"""Named patches selectable from the CLI."""

from .Patch import Patch

IS_CUSTOM = Patch(
    name="isCustom",
    description="Change isCustom:!0 to isCustom:!1 (enable context compression for custom models)",
    pattern=b"isCustom:!0",
    replacement=b"isCustom:!1",
)

# "process.env.FACTORY_API_KEY" is 27 bytes; the quoted fake key is 25 + 2 quotes.
SKIP_LOGIN = Patch(
    name="skipLogin",
    description='Replace process.env.FACTORY_API_KEY with "fk-droid-patch-skip-00000"',
    pattern=b"process.env.FACTORY_API_KEY",
    replacement=b'"fk-droid-patch-skip-00000"',
)

KNOWN_PATCHES: dict[str, Patch] = {
    IS_CUSTOM.name: IS_CUSTOM,
    SKIP_LOGIN.name: SKIP_LOGIN,
}
