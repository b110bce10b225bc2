from mechanic_shop.config import DEFAULTS, read_config


def test_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SHOP_CONFIG", raising=False)
    assert read_config() == DEFAULTS


def test_yaml_values_and_blank_paths(tmp_path):
    p = tmp_path / "shop.yaml"
    p.write_text(
        "db_host: db.internal\nlog_level: debug\nexport_dir: ''\nlog_file: shop.log\n",
        encoding="utf-8",
    )
    cfg = read_config(str(p))
    assert cfg["db_host"] == "db.internal"
    assert cfg["log_level"] == "DEBUG"
    assert cfg["export_dir"] is None
    assert cfg["log_file"] == "shop.log"
    assert cfg["db_driver"] == DEFAULTS["db_driver"]


def test_env_config_path(tmp_path, monkeypatch):
    p = tmp_path / "env.yaml"
    p.write_text("operator: alice\n", encoding="utf-8")
    monkeypatch.setenv("SHOP_CONFIG", str(p))
    assert read_config()["operator"] == "alice"


def test_local_config_yaml_is_picked_up(tmp_path, monkeypatch):
    (tmp_path / "config.yaml").write_text("export_dir: out\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SHOP_CONFIG", raising=False)
    assert read_config()["export_dir"] == "out"
