"""
Test suite for the command-line interface.
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from matomo_client import cli
from matomo_client import config as config_module
from matomo_client.client import ReportingClient
from matomo_client.config import ResponseFormat
from matomo_client.dispatch.interface import RequestError


@pytest.fixture(autouse=True)
def isolate_cli(monkeypatch):
    """Keep CLI runs from touching logging setup and the global config."""
    monkeypatch.setattr(config_module, "_config", None)
    with patch.object(cli, "setup_logging"):
        yield


# ============================================================================
# Test Argument Parsing
# ============================================================================

class TestParser:
    """Tests for argument parsing and config building."""

    def test_call_arguments(self):
        args = cli.create_parser().parse_args([
            "call", "VisitsSummary.get", "-p", "idSite=1", "-p", "period=day",
            "--url", "https://matomo.example.com", "--site-id", "2", "--no-security-mode",
        ])

        assert args.command == "call"
        assert args.method == "VisitsSummary.get"
        assert args.param == ["idSite=1", "period=day"]

        config = cli.build_config(args)
        assert config.url == "https://matomo.example.com"
        assert config.default_site_id == 2
        assert config.security_mode is False

    def test_format_flag(self):
        args = cli.create_parser().parse_args(["call", "Tour.getLevel", "--format", "xml"])

        assert cli.build_config(args).format == ResponseFormat.XML

    def test_parse_params(self):
        assert cli.parse_params(["segment=browserCode==FF", "date="]) == {
            "segment": "browserCode==FF",
            "date": "",
        }

    @pytest.mark.parametrize("item", ["novalue", "=x"])
    def test_parse_params_rejects_malformed(self, item):
        with pytest.raises(ValueError):
            cli.parse_params([item])

    def test_load_batch_file(self, tmp_path):
        path = tmp_path / "batch.json"
        path.write_text(json.dumps([
            {"method": "Tour.getLevel"},
            {"method": "SEO.getRank", "params": {"url": "https://example.com"}},
        ]))

        entries = cli.load_batch_file(str(path))

        assert [entry["method"] for entry in entries] == ["Tour.getLevel", "SEO.getRank"]

    @pytest.mark.parametrize("content", [
        '{"method": "Tour.getLevel"}',
        '[{"params": {}}]',
        '[{"method": "A.b", "params": []}]',
    ])
    def test_load_batch_file_rejects_bad_shape(self, tmp_path, content):
        path = tmp_path / "batch.json"
        path.write_text(content)

        with pytest.raises(ValueError):
            cli.load_batch_file(str(path))


# ============================================================================
# Test Commands
# ============================================================================

class TestCommands:
    """Tests for running commands."""

    def test_no_command_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.main([])

        assert exc_info.value.code == 1

    def test_call_prints_json(self, capsys):
        with patch.object(cli, "run_call", new=AsyncMock(return_value={"level": 3})) as run_call:
            cli.main(["call", "Tour.getLevel", "--url", "https://matomo.example.com"])

        assert json.loads(capsys.readouterr().out) == {"level": 3}
        config, method, params = run_call.call_args.args
        assert method == "Tour.getLevel"
        assert params == {}

    def test_call_error_exits_with_status_one(self, capsys):
        error = RequestError("Matomo API error: No access", method="Tour.getLevel")
        with patch.object(cli, "run_call", new=AsyncMock(side_effect=error)):
            with pytest.raises(SystemExit) as exc_info:
                cli.main(["call", "Tour.getLevel", "--url", "https://matomo.example.com"])

        assert exc_info.value.code == 1
        assert "No access" in capsys.readouterr().err

    def test_batch_prints_ordered_results(self, tmp_path, capsys):
        path = tmp_path / "batch.json"
        path.write_text('[{"method": "Tour.getChallenges"}, {"method": "Tour.getLevel"}]')
        results = [{"challenges": []}, {"level": 3}]

        with patch.object(cli, "run_batch", new=AsyncMock(return_value=results)):
            cli.main(["batch", str(path), "--url", "https://matomo.example.com"])

        assert json.loads(capsys.readouterr().out) == results

    def test_serve_runs_server(self):
        with patch.object(cli, "serve", new=MagicMock()) as serve:
            cli.main(["serve", "--url", "https://matomo.example.com"])

        serve.assert_called_once()


# ============================================================================
# Test Batch Runner
# ============================================================================

class TestRunBatch:
    """Tests for the batch command's bulk execution."""

    @pytest.mark.asyncio
    async def test_per_item_errors_reported_in_place(self, test_config, http_client, matomo):
        matomo.route("Tour.getLevel", {"level": 3})

        with patch.object(
            cli, "ReportingClient",
            side_effect=lambda config: ReportingClient(config, http_client=http_client),
        ):
            output = await cli.run_batch(test_config, [
                {"method": "Tour.getLevel"},
                {"method": "Nope.missing", "params": {}},
            ])

        assert output[0] == {"level": 3}
        assert "does not exist" in output[1]["error"]
        assert len(matomo.requests) == 1
