from argparse import Namespace

import pytest

from libmacrox.preprocessor.config import (
    DEFAULT_MAX_EXPANSION_DEPTH,
    ExpanderConfig,
    build_default_expander_config,
    get_max_reachable_expansion_depth,
    merge_into_expander_config,
    validate_expander_config,
)


def test_default_expander_config() -> None:
    config = build_default_expander_config()
    assert config.max_expansion_depth == DEFAULT_MAX_EXPANSION_DEPTH
    assert not config.process_directives


def test_merge_into_expander_config() -> None:
    config = merge_into_expander_config(
        build_default_expander_config(),
        Namespace(expander_max_expansion_depth=8, expander_process_directives=None),
        prefix="expander",
    )
    assert config.max_expansion_depth == 8
    # Not set values are not overridden
    assert not config.process_directives


def test_merge_into_expander_config_invalid_depth() -> None:
    with pytest.raises(ValueError, match="must be positive"):
        merge_into_expander_config(
            build_default_expander_config(),
            Namespace(max_expansion_depth=0),
        )


def test_merge_into_expander_config_unreachable_depth() -> None:
    with pytest.raises(ValueError, match="must not exceed"):
        merge_into_expander_config(
            build_default_expander_config(),
            Namespace(max_expansion_depth=100_000),
        )


def test_validate_expander_config_reachable_depth() -> None:
    reachable_depth = get_max_reachable_expansion_depth()
    assert reachable_depth >= DEFAULT_MAX_EXPANSION_DEPTH

    validate_expander_config(ExpanderConfig(max_expansion_depth=reachable_depth))
    with pytest.raises(ValueError, match="must not exceed"):
        validate_expander_config(ExpanderConfig(max_expansion_depth=reachable_depth + 1))
