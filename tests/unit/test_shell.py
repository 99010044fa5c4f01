"""
Unit tests for the interactive shell loop.
"""

from rugplay_cli.cli.shell import InteractiveShell
from rugplay_cli.core.exceptions import APIError, NetworkError
from rugplay_cli.domain import PortfolioSummary, SelfProfile


def scripted_input(*lines):
    """Return an input function that yields ``lines`` then signals end of input."""
    queue = list(lines)

    def read(prompt):
        if not queue:
            raise EOFError
        item = queue.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    return read


class TestExecute:
    """Test cases for running single input lines."""

    def test_unknown_command(self, context, output):
        before = context.config.to_dict()

        InteractiveShell(context).execute("launch-rocket now")

        assert 'Command "launch-rocket" does not exist' in output()
        assert "Type 'commands' to list commands." in output()
        assert context.config.to_dict() == before
        assert context.client.method_calls == []

    def test_blank_line_is_ignored(self, context, output):
        InteractiveShell(context).execute("   ")
        assert output() == ""

    def test_extra_whitespace_between_tokens(self, context, output):
        context.client.self_profile.return_value = SelfProfile("Bob", "bobby", "hi")

        InteractiveShell(context).execute("   me   ")

        context.client.self_profile.assert_called_once()
        assert "Bob" in output()

    def test_api_error_is_reported(self, context, output):
        context.client.portfolio_summary.side_effect = APIError(400, "Bad Request", '{"error":"nope"}')

        InteractiveShell(context).execute("summary")

        text = output()
        assert "API ERROR:" in text
        assert '{"error":"nope"}' in text

    def test_domain_error_is_reported(self, context, output):
        context.client.notifications.side_effect = NetworkError("connection [refused]")

        InteractiveShell(context).execute("notifications")

        assert "connection [refused]" in output()

    def test_validation_error_is_reported(self, context, output):
        InteractiveShell(context).execute("buy-coin AAA")

        assert "Missing parameter 'amount'" in output()
        context.client.trade.assert_not_called()

    def test_unexpected_error_is_reported(self, context, output):
        context.client.portfolio_summary.side_effect = RuntimeError("boom")

        InteractiveShell(context).execute("summary")

        assert "Unexpected error in summary: boom" in output()

    def test_interrupted_command(self, context, output):
        context.client.portfolio_summary.side_effect = KeyboardInterrupt

        InteractiveShell(context).execute("summary")

        assert "summary interrupted" in output()

    def test_unauthenticated_warning(self, unauthenticated_context, mock_session, output):
        InteractiveShell(unauthenticated_context).execute("summary")

        assert output().count("must have a cookie set to use this") == 1
        mock_session.request.assert_not_called()


class TestRun:
    """Test cases for the read-eval-print loop."""

    def test_banner_and_command_list(self, context, output):
        code = InteractiveShell(context, input_func=scripted_input()).run()

        text = output()
        assert code == 0
        assert "Rugplay API" in text
        assert "Available commands:" in text
        assert "portfolio():" in text
        assert "market([page], [search-item...]):" in text

    def test_loop_continues_after_error(self, context, output):
        context.client.portfolio_summary.side_effect = [
            APIError(500, "Internal Server Error", "down"),
            PortfolioSummary(1.0, 2.0, 3.0),
        ]

        InteractiveShell(context, input_func=scripted_input("summary", "summary")).run()

        assert context.client.portfolio_summary.call_count == 2
        assert "Total value:" in output()

    def test_ctrl_c_at_prompt_exits(self, context, output):
        shell = InteractiveShell(context, input_func=scripted_input(KeyboardInterrupt(), "summary"))

        assert shell.run() == 0
        assert "Goodbye!" in output()
        context.client.portfolio_summary.assert_not_called()

    def test_prompt_is_passed_to_input(self, context, output):
        prompts = []

        def read(prompt):
            prompts.append(prompt)
            raise EOFError

        InteractiveShell(context, input_func=read).run()

        assert prompts == ["> "]
