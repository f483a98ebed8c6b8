import json

import pytest

from netrate_live.config import CFG, init_cfg_from_args, load_config_file
from netrate_live.errors import ConfigError
from netrate_live.main import parse_args


def test_defaults():
    cfg = init_cfg_from_args(parse_args([]))
    assert cfg == CFG()
    assert cfg.interface == "eth0"
    assert cfg.interval == 2.0
    assert cfg.stop_bytes == 10_000_000
    assert cfg.max_flows == 10
    assert cfg.web_port is None
    assert cfg.console is True


def test_flags_override_file(tmp_path):
    p = tmp_path / "netrate.yaml"
    p.write_text("interface: br-lan\ninterval: 5\nmax_flows: 20\n", encoding="utf-8")
    cfg = init_cfg_from_args(parse_args(["--config", str(p), "--interval", "1", "--no-console"]))
    assert cfg.interface == "br-lan"
    assert cfg.interval == 1.0
    assert cfg.max_flows == 20
    assert cfg.console is False


def test_json_config(tmp_path):
    p = tmp_path / "netrate.json"
    p.write_text(json.dumps({"local_ip": "192.168.1.1", "stop_bytes": 0}), encoding="utf-8")
    assert load_config_file(str(p)) == {"local_ip": "192.168.1.1", "stop_bytes": 0}


def test_empty_yaml_is_empty_config(tmp_path):
    p = tmp_path / "empty.yml"
    p.write_text("", encoding="utf-8")
    assert load_config_file(str(p)) == {}


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config_file(str(tmp_path / "nope.yaml"))


def test_unknown_keys_rejected(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("interfase: eth0\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="interfase"):
        load_config_file(str(p))


def test_non_mapping_rejected(tmp_path):
    p = tmp_path / "list.yaml"
    p.write_text("- eth0\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config_file(str(p))


@pytest.mark.parametrize("argv", [
    ["--interval", "0"],
    ["--stop-bytes", "-1"],
    ["--max-flows", "-3"],
    ["--port", "70000"],
])
def test_invalid_values(argv):
    with pytest.raises(ConfigError):
        init_cfg_from_args(parse_args(argv))


def test_wrong_type_in_file(tmp_path):
    p = tmp_path / "typed.yaml"
    p.write_text("interval: fast\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        init_cfg_from_args(parse_args(["--config", str(p)]))
