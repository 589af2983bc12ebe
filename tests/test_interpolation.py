"""Test cases for cfgfile variable interpolation."""

import pytest

from cfgfile import ConfigFile, ErrorKind, GetError, InterpolationEngine


def test_value_without_references_is_unchanged(config: ConfigFile):
    engine = InterpolationEngine(config)

    for value in ["", "plain", "100%", "%(not closed", "%(bad name)s", "(a)s"]:
        assert engine.resolve(value) == value


def test_chained_interpolation(config: ConfigFile):
    """Test nested references.

    Given default section a=1, b=%(a)s2, c=%(b)s3
    When resolving c
    Then every level is unfolded
    """
    config.add_option("default", "a", "1")
    config.add_option("default", "b", "%(a)s2")
    config.add_option("default", "c", "%(b)s3")

    assert config.get_string("default", "c") == "123"
    assert config.get_raw_string("default", "c") == "%(b)s3"


def test_multiple_references_in_one_value(config: ConfigFile):
    config.add_option("default", "protocol", "http://")
    config.add_option("default", "host", "www.example.com")
    config.add_option("service", "url", "%(protocol)s%(host)s/%(host)s")

    assert config.get_string("service", "url") == "http://www.example.com/www.example.com"


def test_references_are_case_insensitive(config: ConfigFile):
    config.add_option("default", "Host", "example.org")
    config.add_option("service", "url", "%(HOST)s")

    assert config.get_string("service", "url") == "example.org"


def test_lookup_is_restricted_to_default_section(config: ConfigFile):
    """Test lookup scope.

    Given a reference to an option only defined in the value's own section
    When resolving it
    Then resolution fails with option not found in the default section
    """
    config.add_option("service", "host", "local")
    config.add_option("service", "url", "%(host)s")

    with pytest.raises(GetError) as exc_info:
        config.get_string("service", "url")

    assert exc_info.value.kind is ErrorKind.OPTION_NOT_FOUND
    assert exc_info.value.section == "default"
    assert exc_info.value.option == "host"


@pytest.mark.parametrize("option", ["a", "b"])
def test_cyclic_interpolation_reaches_max_depth(config: ConfigFile, option: str):
    config.add_option("default", "a", "%(b)s")
    config.add_option("default", "b", "%(a)s")

    with pytest.raises(GetError) as exc_info:
        config.get_string("default", option)

    assert exc_info.value.kind is ErrorKind.MAX_DEPTH_REACHED
    assert exc_info.value.depth == 200
    assert "max depth of 200 reached" in str(exc_info.value)


def test_self_reference_reaches_max_depth():
    config = ConfigFile(max_depth=5)
    config.add_option("default", "loop", "x%(loop)s")

    with pytest.raises(GetError) as exc_info:
        config.get_string("default", "loop")

    assert exc_info.value.kind is ErrorKind.MAX_DEPTH_REACHED
    assert exc_info.value.depth == 5


def test_depth_ceiling_is_per_instance():
    """Test depth ceiling setting.

    Given a chain needing three passes
    When resolving it with ceilings of 2 and 3
    Then only the higher ceiling succeeds
    """
    shallow = ConfigFile(max_depth=2)
    deep = ConfigFile(max_depth=3)
    for config in (shallow, deep):
        config.add_option("default", "a", "1")
        config.add_option("default", "b", "%(a)s")
        config.add_option("default", "c", "%(b)s")
        config.add_option("default", "d", "%(c)s")

    assert deep.get_string("default", "d") == "1"
    with pytest.raises(GetError):
        shallow.get_string("default", "d")


def test_resolution_does_not_modify_configuration(config: ConfigFile):
    config.add_option("default", "a", "1")
    config.add_option("default", "b", "%(a)s")
    before = config.to_dict()

    config.get_string("default", "b")

    assert config.to_dict() == before
