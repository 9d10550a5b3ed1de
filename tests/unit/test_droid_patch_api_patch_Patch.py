"""Unit tests for droid_patch.api.patch.Patch and the known patches."""

import pytest
from pydantic import ValidationError

from droid_patch.api.patch.build_patches import build_patches
from droid_patch.api.patch.KNOWN_PATCHES import IS_CUSTOM, KNOWN_PATCHES, SKIP_LOGIN
from droid_patch.api.patch.Patch import Patch

pytestmark = pytest.mark.patch


def test_patch_accepts_equal_lengths():
    patch = Patch(name="p", pattern=b"abc", replacement=b"xyz")
    assert patch.description == ""


def test_patch_rejects_unequal_lengths():
    with pytest.raises(ValidationError, match="does not match pattern length"):
        Patch(name="bad", pattern=b"abc", replacement=b"abcd")


def test_patch_rejects_empty_pattern():
    with pytest.raises(ValidationError, match="must not be empty"):
        Patch(name="empty", pattern=b"", replacement=b"")


def test_patch_is_frozen():
    with pytest.raises(ValidationError):
        IS_CUSTOM.name = "other"  # type: ignore[misc]


@pytest.mark.parametrize("patch", [IS_CUSTOM, SKIP_LOGIN])
def test_known_patches_keep_length(patch):
    assert len(patch.pattern) == len(patch.replacement)


def test_known_patch_bytes():
    assert IS_CUSTOM.pattern == b"isCustom:!0"
    assert IS_CUSTOM.replacement == b"isCustom:!1"
    assert SKIP_LOGIN.pattern == b"process.env.FACTORY_API_KEY"
    assert SKIP_LOGIN.replacement == b'"fk-droid-patch-skip-00000"'
    assert set(KNOWN_PATCHES) == {"isCustom", "skipLogin"}


def test_build_patches_follows_flags():
    assert build_patches() == []
    assert build_patches(is_custom=True) == [IS_CUSTOM]
    assert build_patches(skip_login=True) == [SKIP_LOGIN]
    assert build_patches(is_custom=True, skip_login=True) == [IS_CUSTOM, SKIP_LOGIN]
