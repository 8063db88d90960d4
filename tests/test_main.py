import os
import logging

from siteindex import main

from conftest import read, touch


def test_zero_argument_run(site, monkeypatch, capsys):
    monkeypatch.chdir(str(site))
    assert main.main([]) == 0
    assert os.path.isfile(str(site / "webapps" / "alpha" / "index.html"))
    assert os.path.isfile(str(site / "webapps" / "index.html"))
    assert "Wrote webapps/index.html with 2 links." in capsys.readouterr().out


def test_root_option(site):
    assert main.main(["--root", str(site), "subdirs"]) == 0
    assert os.path.isfile(str(site / "webapps" / "beta" / "index.html"))


def test_missing_root_exits_1(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="siteindex"):
        assert main.main(["--root", str(tmp_path)]) == 1
    assert "Missing directory: %s" % (tmp_path / "webapps") in caplog.text
    assert os.listdir(str(tmp_path)) == []


def test_content_dir_from_site_yaml(tmp_path):
    touch(str(tmp_path / "site.yaml"), "content-dir: apps\n")
    touch(str(tmp_path / "apps" / "one" / "a.html"))
    assert main.main(["--root", str(tmp_path)]) == 0
    assert "apps/one/" in read(str(tmp_path / "apps" / "one" / "index.html"))


def test_content_dir_flag_overrides_config(tmp_path):
    touch(str(tmp_path / "site.yaml"), "content-dir: apps\n")
    touch(str(tmp_path / "pages" / "one" / "a.html"))
    assert main.main(["--root", str(tmp_path),
                      "subdirs", "--content-dir", "pages"]) == 0
    assert os.path.isfile(str(tmp_path / "pages" / "index.html"))


def test_bad_config_exits_1(tmp_path, caplog):
    touch(str(tmp_path / "site.yaml"), "content-dir: 5\n")
    os.makedirs(str(tmp_path / "webapps"))
    with caplog.at_level(logging.ERROR, logger="siteindex"):
        assert main.main(["--root", str(tmp_path)]) == 1
    assert not os.path.exists(str(tmp_path / "webapps" / "index.html"))


def test_flat_defaults_to_moss(tmp_path, capsys):
    touch(str(tmp_path / "moss" / "a.html"))
    assert main.main(["--root", str(tmp_path), "flat"]) == 0
    assert capsys.readouterr().out == "Wrote moss/index.html with 1 links.\n"


def test_flat_explicit_dirs(tmp_path, capsys):
    touch(str(tmp_path / "one" / "a.html"))
    os.makedirs(str(tmp_path / "two"))
    assert main.main(["--root", str(tmp_path), "flat", "one", "two"]) == 0
    assert capsys.readouterr().out == (
        "Wrote one/index.html with 1 links.\n"
        "Wrote two/index.html with 0 links.\n")


def test_unexpected_error_exits_1(site, caplog):
    os.makedirs(str(site / "webapps" / "beta" / "index.html"))
    with caplog.at_level(logging.ERROR, logger="siteindex"):
        assert main.main(["--root", str(site)]) == 1
    assert "failed to generate indexes" in caplog.text
    assert "failed to write" in caplog.text
    # alpha was written before the failure and stays
    assert os.path.isfile(str(site / "webapps" / "alpha" / "index.html"))
