import pytest

from stat_workbench.cli.validation import CASTERS, ENV_PREFIX
from stat_workbench.config.loader import load_config_with_precedence
from stat_workbench.exceptions import ConfigValidationError

DEFAULTS = {"confidence_level": 95, "family": "normal", "bin_count": None}


def test_precedence_cli_over_env_over_file_over_default(tmp_path):
    path = tmp_path / "analysis.yaml"
    path.write_text("confidence_level: 90\nfamily: poisson\nbin_count: 7\n")
    merged = load_config_with_precedence(
        config_path=path,
        env_prefix=ENV_PREFIX,
        cli_values={"confidence_level": 99, "family": None},
        defaults=DEFAULTS,
        casters=CASTERS,
        environ={"STATWB_FAMILY": "uniform", "STATWB_CONFIDENCE_LEVEL": "98"},
    )
    assert merged == {"confidence_level": 99, "family": "uniform", "bin_count": 7}


def test_env_values_are_cast():
    merged = load_config_with_precedence(
        None, ENV_PREFIX, {}, DEFAULTS, casters=CASTERS, environ={"STATWB_BIN_COUNT": "12"}
    )
    assert merged["bin_count"] == 12


def test_json_config_and_unknown_keys(tmp_path):
    path = tmp_path / "analysis.json"
    path.write_text('{"family": "exponential", "colour": "blue"}')
    merged = load_config_with_precedence(path, ENV_PREFIX, {}, DEFAULTS, environ={})
    assert merged["family"] == "exponential"
    assert "colour" not in merged


def test_empty_yaml_keeps_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    assert load_config_with_precedence(path, ENV_PREFIX, {}, DEFAULTS, environ={}) == DEFAULTS


@pytest.mark.parametrize(
    "name,content",
    [("list.yaml", "- 1\n- 2\n"), ("bad.yaml", "a: [1, 2\n"), ("conf.toml", "a = 1\n")],
)
def test_invalid_config_files_raise(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content)
    with pytest.raises(ConfigValidationError):
        load_config_with_precedence(path, ENV_PREFIX, {}, DEFAULTS, environ={})


def test_missing_config_file_raises(tmp_path):
    with pytest.raises(ConfigValidationError):
        load_config_with_precedence(tmp_path / "nope.yaml", ENV_PREFIX, {}, DEFAULTS, environ={})


def test_uncastable_value_raises():
    with pytest.raises(ConfigValidationError):
        load_config_with_precedence(
            None, ENV_PREFIX, {"confidence_level": "high"}, DEFAULTS, casters=CASTERS, environ={}
        )
