from __future__ import annotations

import pytest

from starterkit.naming import (
    DEFAULT_TARGET_DIR,
    format_target_dir,
    is_valid_package_name,
    to_valid_package_name,
)


@pytest.mark.parametrize(
    "value",
    ["my-app", "@scope/app_name", "app.js", "~tilde", "-dash", "@*/x", "123"],
)
def test_is_valid_package_name_accepts(value):
    assert is_valid_package_name(value)


@pytest.mark.parametrize(
    "value",
    ["My App", "@Scope/x", "app\u0663", "@scope\u0661/x", "MyApp", "my app", "", "@scope/", "my-app!", "_private", ".hidden", "my-app\n"],
)
def test_is_valid_package_name_rejects(value):
    assert not is_valid_package_name(value)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("My App", "my-app"),
        ("  Spaced   Out  ", "spaced-out"),
        ("__weird..name", "-weird-name"),
        (".dotfile", "dotfile"),
        ("@scope/pkg", "-scope-pkg"),
        ("already-valid", "already-valid"),
        ("@@@", "-"),
        ("app\u0663", "app-"),
        ("\uff11\uff12\uff13", "-"),
        ("", DEFAULT_TARGET_DIR),
        ("   ", DEFAULT_TARGET_DIR),
    ],
)
def test_to_valid_package_name(value, expected):
    assert to_valid_package_name(value) == expected


@pytest.mark.parametrize(
    "value",
    ["My App", "__weird..name", "Café ☕", "a  b\tc", "._x", "@Scope/Name", "!!!", "", "x~y"],
)
def test_to_valid_package_name_is_idempotent_and_valid(value):
    once = to_valid_package_name(value)
    assert to_valid_package_name(once) == once
    assert is_valid_package_name(once)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("my-app", "my-app"),
        ("  my-app//  ", "my-app"),
        ("nested/dir/", "nested/dir"),
        (".", "."),
        ("", None),
        ("   ", None),
        (None, None),
    ],
)
def test_format_target_dir(value, expected):
    assert format_target_dir(value) == expected
