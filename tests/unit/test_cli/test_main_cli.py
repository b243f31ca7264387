#!/usr/bin/env python3
"""
Unit tests for the root command group and utility commands.
"""

import pytest
from click.testing import CliRunner

from campaigen import __version__
from campaigen.cli.main import main
from campaigen.spend import SpendRecordStore
from tests.fixtures.synthetic_data import make_spend_record


@pytest.mark.unit
class TestMainCLI:
    """Test version, config and status."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_version(self):
        result = self.runner.invoke(main, ["version"])

        assert result.exit_code == 0
        assert f"Campaigen v{__version__}" in result.output

    def test_config_shows_database(self, database_url):
        result = self.runner.invoke(main, ["config"])

        assert result.exit_code == 0
        assert "Environment: test" in result.output
        assert database_url in result.output

    def test_status_counts_records(self, session):
        SpendRecordStore(session).add(make_spend_record())

        result = self.runner.invoke(main, ["status"])

        assert result.exit_code == 0, result.output
        assert "Spend records: 1 record" in result.output
        assert "Influencers: No records" in result.output

    def test_verbose_prints_environment(self):
        result = self.runner.invoke(main, ["--verbose", "spend", "list"])

        assert result.exit_code == 0
        assert "Environment: test" in result.output

    def test_help_lists_resource_groups(self):
        result = self.runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "spend" in result.output
        assert "influencer" in result.output
