import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import main
from application.commit_flow import (
    STATUS_COMMITTED,
    STATUS_FAILED,
    STATUS_NO_CHANGES,
    CommitFlowResult,
)
from domain.models import BranchRef, CommitRequest, CommitResult, HistoryNode, RepositoryRef
from infrastructure.actions import ActionSettings, build_commit_flow_config
from infrastructure.actions import workflow_commands
from infrastructure.actions.inputs import get_input, get_multiline_input
from infrastructure.github import DEFAULT_TIMEOUT_SECONDS


_BASE_ENV = {
    "GITHUB_REPOSITORY": "owner/repo",
    "GITHUB_TOKEN": "ghs_envtoken",
}


class ActionInputsTests(unittest.TestCase):
    def test_input_names_map_to_upper_case_env_vars(self) -> None:
        with patch.dict(os.environ, {"INPUT_BRANCH-NAME": "  feature  ", "INPUT_MY_INPUT": "x"}):
            self.assertEqual(get_input("branch-name"), "feature")
            self.assertEqual(get_input("my input"), "x")

    def test_multiline_input_skips_blank_lines(self) -> None:
        with patch.dict(os.environ, {"INPUT_FILES": "a.txt\n\n  dist/app.js \n"}):
            self.assertEqual(get_multiline_input("files"), ["a.txt", "dist/app.js"])

    def test_required_input_raises_when_missing(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(RuntimeError):
                get_input("files", required=True)


class ActionSettingsTests(unittest.TestCase):
    def test_from_env_reads_inputs_and_repository(self) -> None:
        env = dict(
            _BASE_ENV,
            **{
                "INPUT_FILES": "a.txt\nb.txt",
                "INPUT_BRANCH-NAME": "feature",
                "INPUT_COMMIT-MESSAGE": "feat: add files\n\nbody text",
                "GITHUB_WORKSPACE": "/tmp/workspace",
                "GITHUB_API_TIMEOUT": "12.5",
                "GITHUB_RUN_ID": "42",
            },
        )
        with patch.dict(os.environ, env, clear=True):
            settings = ActionSettings.from_env()

        self.assertEqual(settings.file_paths, ("a.txt", "b.txt"))
        self.assertEqual(settings.branch_name, "feature")
        self.assertEqual((settings.repository_owner, settings.repository_name), ("owner", "repo"))
        self.assertEqual(settings.workspace, Path("/tmp/workspace"))
        self.assertEqual(settings.api_timeout_seconds, 12.5)
        self.assertEqual(settings.run_id, "42")
        self.assertEqual(settings.github_token, "ghs_envtoken")
        self.assertNotIn("ghs_envtoken", repr(settings))

        config = build_commit_flow_config(settings)
        self.assertEqual(config.commit_message.headline, "feat: add files")
        self.assertEqual(config.commit_message.body, "body text")

    def test_token_input_takes_precedence_over_env(self) -> None:
        with patch.dict(os.environ, dict(_BASE_ENV, **{"INPUT_GITHUB-TOKEN": "ghs_inputtoken"}), clear=True):
            self.assertEqual(ActionSettings.from_env().github_token, "ghs_inputtoken")

    def test_missing_files_are_left_to_the_commit_flow(self) -> None:
        with patch.dict(os.environ, _BASE_ENV, clear=True):
            settings = ActionSettings.from_env()

        self.assertEqual(settings.file_paths, ())
        self.assertEqual(settings.branch_name, "")
        self.assertEqual(settings.commit_message, "Commit files via GitHub API")
        self.assertEqual(settings.api_timeout_seconds, DEFAULT_TIMEOUT_SECONDS)

    def test_malformed_repository_is_rejected(self) -> None:
        with patch.dict(os.environ, dict(_BASE_ENV, GITHUB_REPOSITORY="just-a-name"), clear=True):
            with self.assertRaises(RuntimeError):
                ActionSettings.from_env()

    def test_missing_token_is_rejected(self) -> None:
        with patch.dict(os.environ, {"GITHUB_REPOSITORY": "owner/repo"}, clear=True):
            with self.assertRaises(RuntimeError):
                ActionSettings.from_env()

    def test_invalid_timeout_is_rejected(self) -> None:
        with patch.dict(os.environ, dict(_BASE_ENV, GITHUB_API_TIMEOUT="soon"), clear=True):
            with self.assertRaises(RuntimeError):
                ActionSettings.from_env()


class WorkflowCommandsTests(unittest.TestCase):
    def test_commands_escape_newlines(self) -> None:
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            workflow_commands.error("line one\nline two 100%")

        self.assertEqual(stdout.getvalue(), "::error::line one%0Aline two 100%25\n")

    def test_group_wraps_output(self) -> None:
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            with workflow_commands.group("committing files"):
                pass

        lines = stdout.getvalue().splitlines()
        self.assertEqual(lines[0], "::group::committing files")
        self.assertTrue(lines[1].startswith("::debug::time taken: "))
        self.assertEqual(lines[-1], "::endgroup::")

    def test_set_output_appends_to_output_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_directory:
            output_path = Path(tmp_directory) / "output"
            with patch.dict(os.environ, {"GITHUB_OUTPUT": str(output_path)}):
                workflow_commands.set_output("commit-sha", "C2")
            lines = output_path.read_text(encoding="utf-8").splitlines()

        delimiter = lines[0].split("<<", 1)[1]
        self.assertEqual(lines[0], f"commit-sha<<{delimiter}")
        self.assertEqual(lines[1:], ["C2", delimiter])


class ReportResultTests(unittest.TestCase):
    def _report(self, result: CommitFlowResult) -> tuple[int, str, str]:
        with tempfile.TemporaryDirectory() as tmp_directory:
            output_path = Path(tmp_directory) / "output"
            output_path.touch()
            with patch.dict(os.environ, {"GITHUB_OUTPUT": str(output_path)}), patch(
                "sys.stdout", new_callable=io.StringIO
            ) as stdout:
                exit_code = main.report_result(result)
            return exit_code, stdout.getvalue(), output_path.read_text(encoding="utf-8")

    def test_committed_result_sets_commit_sha(self) -> None:
        exit_code, _, outputs = self._report(
            CommitFlowResult(status=STATUS_COMMITTED, message="ok", commit_oid="C2", branch="main")
        )

        self.assertEqual(exit_code, main.EXIT_SUCCESS)
        self.assertIn("commit-sha<<", outputs)
        self.assertIn("\nC2\n", outputs)
        self.assertIn("\ncommitted\n", outputs)

    def test_no_changes_result_is_a_notice(self) -> None:
        exit_code, stdout, outputs = self._report(
            CommitFlowResult(status=STATUS_NO_CHANGES, message="No changes found")
        )

        self.assertEqual(exit_code, main.EXIT_SUCCESS)
        self.assertIn("::notice::No changes found", stdout)
        self.assertNotIn("commit-sha", outputs)
        self.assertIn("\nno_changes\n", outputs)

    def test_failed_result_is_an_error(self) -> None:
        exit_code, stdout, _ = self._report(
            CommitFlowResult(status=STATUS_FAILED, message='Input <branch-name> "feature" not found')
        )

        self.assertEqual(exit_code, main.EXIT_FAILURE)
        self.assertIn('::error::Input <branch-name> "feature" not found', stdout)

    def test_committed_result_without_oid_fails(self) -> None:
        exit_code, stdout, outputs = self._report(CommitFlowResult(status=STATUS_COMMITTED, message="ok"))

        self.assertEqual(exit_code, main.EXIT_FAILURE)
        self.assertIn("::error::", stdout)
        self.assertNotIn("commit-sha", outputs)


class _RecordingGitHubClient:
    def __init__(self) -> None:
        self.commit_requests: list[CommitRequest] = []
        self.closed = False

    def __enter__(self) -> "_RecordingGitHubClient":
        return self

    def __exit__(self, *_: object) -> None:
        self.closed = True

    def get_repository(self, owner: str, repo: str, branch_name: str) -> RepositoryRef:
        main_branch = BranchRef(name="main", history=(HistoryNode(typename="Commit", oid="P1"),))
        return RepositoryRef(name_with_owner=f"{owner}/{repo}", default_branch_ref=main_branch, ref=main_branch)

    def create_commit_on_branch(self, request: CommitRequest) -> CommitResult:
        self.commit_requests.append(request)
        return CommitResult(oid="C2")


class MainTests(unittest.TestCase):
    def test_main_commits_workspace_file_end_to_end(self) -> None:
        github_client = _RecordingGitHubClient()
        with tempfile.TemporaryDirectory() as tmp_directory:
            workspace = Path(tmp_directory)
            (workspace / "a.txt").write_text("hi", encoding="utf-8")
            output_path = workspace / "github_output"
            env = dict(
                _BASE_ENV,
                **{
                    "INPUT_FILES": "a.txt",
                    "INPUT_BRANCH-NAME": "main",
                    "GITHUB_WORKSPACE": str(workspace),
                    "GITHUB_OUTPUT": str(output_path),
                },
            )
            with patch.dict(os.environ, env, clear=True), patch.object(
                main, "load_dotenv"
            ), patch.object(main, "build_github_client", return_value=github_client), patch(
                "sys.stdout", new_callable=io.StringIO
            ):
                exit_code = main.main()
            outputs = output_path.read_text(encoding="utf-8")

        self.assertEqual(exit_code, main.EXIT_SUCCESS)
        self.assertTrue(github_client.closed)
        self.assertEqual(github_client.commit_requests[0].expected_head_oid, "P1")
        self.assertEqual(github_client.commit_requests[0].change_set.additions[0].contents, b"hi")
        self.assertIn("\nC2\n", outputs)

    def test_main_reports_configuration_errors(self) -> None:
        with patch.dict(os.environ, {}, clear=True), patch.object(main, "load_dotenv"), patch(
            "sys.stdout", new_callable=io.StringIO
        ) as stdout:
            exit_code = main.main()

        self.assertEqual(exit_code, main.EXIT_FAILURE)
        self.assertIn("::error::Missing GitHub token", stdout.getvalue())


if __name__ == "__main__":
    unittest.main()
