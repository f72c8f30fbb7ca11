from __future__ import annotations

import pytest

from stylegate.types import Casing
from stylegate.utils.casing import detect_casing, is_hook_name


def describe_detect_casing() -> None:

    @pytest.mark.parametrize('name,expected', [
        ('MyComponent', Casing.PASCAL),
        ('Button2', Casing.PASCAL),
        ('HTTPClient', Casing.PASCAL),
        ('A', Casing.PASCAL),
        ('myComponent', Casing.CAMEL),
        ('mycomponent', Casing.CAMEL),
        ('useMyHook', Casing.CAMEL),
        ('x1', Casing.CAMEL),
        ('MAX_SIZE', Casing.SCREAMING_SNAKE),
        ('ID', Casing.SCREAMING_SNAKE),
        ('my_value', Casing.SNAKE),
        ('my-thing', Casing.KEBAB),
        ('My_Thing', Casing.MIXED),
    ])
    def should_classify_names(name: str, expected: Casing) -> None:
        assert detect_casing(name) is expected

    @pytest.mark.parametrize('name,expected', [
        ('_privateThing', Casing.CAMEL),
        ('$el', Casing.CAMEL),
        ('__Internal', Casing.PASCAL),
    ])
    def should_ignore_leading_underscores_and_dollars(name: str, expected: Casing) -> None:
        assert detect_casing(name) is expected

    @pytest.mark.parametrize('name', ['_', '$', '__'])
    def should_treat_placeholders_as_mixed(name: str) -> None:
        assert detect_casing(name) is Casing.MIXED


def describe_is_hook_name() -> None:

    @pytest.mark.parametrize('name', ['useState', 'useMyHook', 'useX'])
    def should_accept_hooks(name: str) -> None:
        assert is_hook_name(name)

    @pytest.mark.parametrize('name', ['use', 'user', 'usefulThing', 'UseThing', 'fetchData'])
    def should_reject_non_hooks(name: str) -> None:
        assert not is_hook_name(name)
