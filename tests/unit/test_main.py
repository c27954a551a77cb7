"""
Unit tests for the command-line entry point
"""

import asyncio

import pytest

from main import QuoteService, create_parser, main


@pytest.mark.unit
class TestCommandLine:

    def test_api_arguments(self):
        args = create_parser().parse_args(["api", "--host", "127.0.0.1", "--port", "8080"])
        assert args.command == "api"
        assert args.host == "127.0.0.1"
        assert args.port == 8080

    def test_api_defaults_come_from_config(self):
        args = create_parser().parse_args(["api"])
        assert args.host is None
        assert args.port is None

    def test_status_output(self, capsys):
        QuoteService().show_status()
        out = capsys.readouterr().out
        assert "Quote Service Status" in out
        assert "motivation" in out

    def test_no_command_prints_help(self, capsys):
        assert asyncio.run(main([])) == 0
        assert "usage" in capsys.readouterr().out.lower()
