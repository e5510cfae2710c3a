"""
Tests for the FX Chart Analyzer command-line interface.
"""

import json
from unittest.mock import patch

import pytest

from modules.fx_chart_analyzer.cli.argument_parser import parse_args
from modules.fx_chart_analyzer.cli.display import display_analysis, render_heatmap
from modules.fx_chart_analyzer.cli.main import build_pipeline, main


class TestParseArgs:
    """Test parse_args function."""

    def test_defaults(self):
        args = parse_args(["--image", "chart.png"])

        assert args.image == "chart.png"
        assert args.pair == "USD/JPY"
        assert args.timeframe == "1H"
        assert args.api_key is None
        assert args.demo is False
        assert args.demo_delay == 2.0
        assert args.json is False

    def test_pair_and_timeframe_are_normalized(self):
        args = parse_args(["--image", "chart.png", "--pair", "eur/usd", "--timeframe", "1mo"])

        assert args.pair == "EUR/USD"
        assert args.timeframe == "1MO"

    def test_missing_image_exits(self):
        with pytest.raises(SystemExit):
            parse_args([])

    def test_unknown_pair_exits(self):
        with pytest.raises(SystemExit):
            parse_args(["--image", "chart.png", "--pair", "BTC/USD"])

    def test_unknown_timeframe_exits(self):
        with pytest.raises(SystemExit):
            parse_args(["--image", "chart.png", "--timeframe", "2H"])

    def test_negative_demo_delay_exits(self):
        with pytest.raises(SystemExit):
            parse_args(["--image", "chart.png", "--demo-delay", "-1"])


class TestBuildPipeline:
    """Test build_pipeline function."""

    @patch("modules.fx_chart_analyzer.core.gemini_client.genai")
    def test_demo_flag_ignores_api_key(self, mock_genai):
        pipeline = build_pipeline("real-key", demo=True, demo_delay=0)

        assert pipeline.client.is_configured is False
        assert pipeline.synthesizer.delay == 0
        mock_genai.Client.assert_not_called()

    @patch("modules.fx_chart_analyzer.core.gemini_client.genai")
    def test_api_key_configures_client(self, mock_genai):
        pipeline = build_pipeline("real-key", demo=False, demo_delay=1.5)

        assert pipeline.client.is_configured is True
        assert pipeline.synthesizer.delay == 1.5
        mock_genai.Client.assert_called_once_with(api_key="real-key")


@patch("modules.fx_chart_analyzer.cli.main.colorama_init")
class TestMain:
    """Test main function end to end in demo mode."""

    def test_json_output(self, _mock_colorama, sample_image_path, capsys):
        exit_code = main(["--image", sample_image_path, "--pair", "EUR/USD", "--timeframe", "4H",
                          "--demo", "--demo-delay", "0", "--json"])

        assert exit_code == 0
        result = json.loads(capsys.readouterr().out)
        assert result["bullishProbability"] + result["bearishProbability"] == 100
        assert len(result["heatmapData"]) == 28
        assert "EUR/USD" in result["technicalAnalysis"]
        assert "4H" in result["technicalAnalysis"]

    def test_report_output(self, _mock_colorama, sample_image_path, capsys):
        exit_code = main(["--image", sample_image_path, "--demo", "--demo-delay", "0"])

        assert exit_code == 0
        out = capsys.readouterr().out
        assert "AI ANALYSIS: USD/JPY (1H)" in out
        assert "Technical Analysis" in out
        assert "Risk Factors" in out
        assert "Source: demo synthesizer (no API key configured)" in out

    def test_missing_image_returns_error(self, _mock_colorama, tmp_path):
        missing = str(tmp_path / "missing.png")

        assert main(["--image", missing, "--demo", "--demo-delay", "0"]) == 1

    def test_non_image_file_returns_error(self, _mock_colorama, tmp_path):
        text_file = tmp_path / "notes.txt"
        text_file.write_text("not an image")

        assert main(["--image", str(text_file), "--demo", "--demo-delay", "0"]) == 1


class TestDisplay:
    """Test terminal rendering helpers."""

    def test_render_heatmap_rows(self):
        rows = render_heatmap([0.5] * 28, columns=7)

        assert len(rows) == 4

    def test_display_analysis_defaults(self, capsys):
        display_analysis({}, "GBP/USD", "15M")

        out = capsys.readouterr().out
        assert "GBP/USD (15M)" in out
        assert "N/A" in out
        assert "50%" in out

    def test_display_analysis_non_numeric_sentiment(self, capsys):
        result = {"bullishProbability": 55, "bearishProbability": 45, "sentiment": {"economic": "high", "market": 70}}

        display_analysis(result, "EUR/USD", "4H")

        out = capsys.readouterr().out
        assert "70%" in out
        assert "high" not in out
