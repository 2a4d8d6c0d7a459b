"""Integration tests for end-to-end workflows."""

import json
import logging
import sys

import openpyxl
import pytest

import render_trends
from courtstats import build_series, canvas_size, layout, load_season, paint
from courtstats.config import clear_config_cache, get_config
from courtstats.excel_export import export_season_workbook
from courtstats.surfaces import SvgSurface


@pytest.fixture(autouse=True)
def reset_logging():
    """The CLI installs console handlers; drop them after each test."""
    yield
    logging.getLogger('courtstats').handlers = []


@pytest.fixture
def season_path(tmp_path, season_data):
    path = tmp_path / 'data' / 'games.json'
    path.parent.mkdir()
    with open(path, 'w') as f:
        json.dump(season_data, f, indent=2)
    return path


def run_cli(monkeypatch, *args):
    monkeypatch.setattr(sys, 'argv', ['render_trends.py', *args])
    render_trends.main()


class TestPipeline:
    """Load -> series -> layout -> paint."""

    def test_redraw_is_stateless(self, season_path):
        """Two identical redraws produce identical SVG documents."""
        season = load_season(season_path)
        size = canvas_size(900, 2)

        outputs = []
        for _ in range(2):
            data = build_series(season.players, season.games, 'reb')
            surface = SvgSurface(size.width, size.height)
            paint(layout(['C', 'A'], 'reb', data, size.width, size.height), surface)
            outputs.append(surface.to_svg())

        assert outputs[0] == outputs[1]

    def test_excel_export(self, season_path, tmp_path):
        season = load_season(season_path)
        out = export_season_workbook(season, tmp_path / 'xlsx' / 'season.xlsx')

        wb = openpyxl.load_workbook(out)
        assert wb.sheetnames == ['Totals', 'Game Log']
        totals = wb['Totals']
        assert totals['A1'].value == 'Player'
        assert totals['A1'].font.bold
        assert totals['A2'].value == 'A'
        assert totals['C2'].value == 42
        assert wb['Game Log'].max_row == 4
        wb.close()


class TestCli:
    """Tests for render_trends.py."""

    def test_svg_chart_and_summary(self, monkeypatch, season_path, tmp_path, capsys):
        chart = tmp_path / 'out' / 'chart.svg'
        summary = tmp_path / 'out' / 'overview.json'
        run_cli(
            monkeypatch,
            '--data', str(season_path),
            '--metric', 'pts',
            '--players', 'A,B',
            '--output', str(chart),
            '--width', '600',
            '--dpr', '1',
            '--summary', str(summary),
        )

        out = capsys.readouterr().out
        assert '3 games tracked • Record 1-2' in out
        assert '1. A' in out
        assert '<svg' in chart.read_text(encoding='utf-8')
        assert json.loads(summary.read_text(encoding='utf-8'))['record'] == '1-2'

    def test_png_and_excel(self, monkeypatch, season_path, tmp_path):
        chart = tmp_path / 'chart.png'
        excel = tmp_path / 'season.xlsx'
        run_cli(
            monkeypatch,
            '--data', str(season_path),
            '--metric', 'tpp',
            '--output', str(chart),
            '--excel', str(excel),
        )
        assert chart.exists()
        assert excel.exists()

    def test_unknown_player(self, monkeypatch, season_path, tmp_path):
        with pytest.raises(SystemExit) as exc:
            run_cli(
                monkeypatch,
                '--data', str(season_path),
                '--players', 'A,Zed',
                '--output', str(tmp_path / 'c.svg'),
            )
        assert exc.value.code == 1

    def test_load_failure(self, monkeypatch, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            run_cli(monkeypatch, '--data', str(tmp_path / 'missing.json'))
        assert exc.value.code == 1
        assert 'Failed to load' in capsys.readouterr().err

    def test_check_invalid_file(self, monkeypatch, tmp_path, season_data):
        season_data['games'][0]['players']['A']['tpm'] = 9
        path = tmp_path / 'bad.json'
        path.write_text(json.dumps(season_data), encoding='utf-8')
        with pytest.raises(SystemExit) as exc:
            run_cli(monkeypatch, '--data', str(path), '--check')
        assert exc.value.code == 1

    def test_check_valid_file(self, monkeypatch, season_path, capsys):
        run_cli(monkeypatch, '--data', str(season_path), '--check')
        assert 'is valid' in capsys.readouterr().out


class TestConfig:
    """Tests for dashboard configuration loading."""

    def test_repository_config(self):
        clear_config_cache()
        config = get_config()
        assert config.default_metric == 'pts'
        assert config.container_width == 1200

    def test_missing_config_uses_defaults(self, monkeypatch, tmp_path):
        from courtstats import config as config_module

        monkeypatch.setattr(config_module, 'CONFIG_PATH', tmp_path / 'none.json')
        clear_config_cache()
        try:
            assert get_config().device_pixel_ratio == 1.0
        finally:
            clear_config_cache()


class TestLogging:
    """Tests for setup_logging."""

    def test_single_console_handler(self):
        import io

        from courtstats.logging_config import setup_logging

        stream = io.StringIO()
        setup_logging(stream=stream)
        logger = setup_logging(stream=stream)
        assert len(logger.handlers) == 1

        logging.getLogger('courtstats.store').info('Loaded season')
        assert stream.getvalue() == 'INFO: Loaded season\n'

    def test_debug_format_names_module(self):
        import io

        from courtstats.logging_config import setup_logging

        stream = io.StringIO()
        setup_logging(level=logging.DEBUG, stream=stream)
        logging.getLogger('courtstats.chart').debug('No visible points')
        assert 'courtstats.chart DEBUG: No visible points' in stream.getvalue()
