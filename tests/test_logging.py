"""Tests for logging: silent library use and the events the manager emits."""
import logging
import subprocess
import sys
from pathlib import Path

from structlog.testing import capture_logs

from logging_setup import setup_logging
from parameter import URLParameter
from urlmanager import URLManager

ROOT = Path(__file__).parent.parent


def events(logs, name):
    return [entry for entry in logs if entry["event"] == name]


class TestLibraryUse:

    def test_fresh_process_prints_only_result(self):
        code = "from urlmanager import URLManager; print(URLManager('http://x/y?a=1').generate_url())"

        result = subprocess.run(
            [sys.executable, "-c", code], cwd=ROOT, capture_output=True, text=True, check=True
        )

        assert result.stdout == "http://x/y?a=1\n"

    def test_nothing_written_to_stdout(self, capsys):
        URLManager("http://x/y?a=1&flag").generate_url()

        assert capsys.readouterr().out == ""


class TestEvents:

    def test_query_parsed(self):
        with capture_logs() as logs:
            URLManager("http://x/y?a=1&b=2")

        [entry] = events(logs, "query_parsed")
        assert entry["log_level"] == "debug"
        assert entry["base"] == "http://x/y"
        assert entry["params"] == 2
        assert entry["order"] == "reverse"

    def test_query_pair_malformed(self):
        with capture_logs() as logs:
            URLManager("http://x/y?flag&a=1")

        [entry] = events(logs, "query_pair_malformed")
        assert entry["log_level"] == "warning"
        assert entry["pair"] == "flag"

    def test_params_added(self):
        manager = URLManager("http://x/y")

        with capture_logs() as logs:
            manager.add_param(URLParameter("a", "1"), URLParameter("b", "2"))

        assert events(logs, "params_added")[0]["count"] == 2

    def test_update_and_insert(self):
        manager = URLManager("http://x/y?a=1")

        with capture_logs() as logs:
            manager.upsert_param("a", "2")
            manager.upsert_param("b", "3")

        assert [e["key"] for e in events(logs, "param_updated")] == ["a"]
        assert [e["key"] for e in events(logs, "param_inserted")] == ["b"]

    def test_url_generated(self):
        with capture_logs() as logs:
            URLManager("http://x/y?a=1").generate_url()

        assert events(logs, "url_generated")[0]["url"] == "http://x/y?a=1"


class TestSetupLogging:

    def test_sets_root_level(self):
        setup_logging("debug")

        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("loud")

        assert logging.getLogger().level == logging.INFO
