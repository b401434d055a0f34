from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest

from textinsight.database.models import TextDocument
from textinsight.database.repositories.factory import Repositories
from textinsight.database.repositories.memory import (
    InMemoryAnalysisResultRepository,
    InMemoryModelRepository,
    InMemoryTextDocumentRepository,
)
from textinsight.main import main, parse_args


def _repositories(content: str) -> Repositories:
    return Repositories(
        results=InMemoryAnalysisResultRepository(),
        documents=InMemoryTextDocumentRepository(
            [TextDocument(id=1, content=content, language="en")]
        ),
        models=InMemoryModelRepository(languages=["en"]),
    )


@pytest.fixture(autouse=True)
def postgres_backend(monkeypatch: pytest.MonkeyPatch) -> Iterator[MagicMock]:
    monkeypatch.setenv("STORAGE_BACKEND", "postgres")
    with patch("textinsight.main.init_pool") as mock_init, patch("textinsight.main.close_pool"):
        yield mock_init


class TestParseArgs:
    def test_document_id_and_types(self) -> None:
        args = parse_args(["5", "--types", "sentiment", "keywords"])

        assert args.document_id == 5
        assert args.types == ["sentiment", "keywords"]

    def test_types_are_optional(self) -> None:
        assert parse_args(["5"]).types is None


class TestMain:
    @patch("textinsight.main.Log.configure")
    def test_prints_status_per_type(
        self, _configure: object, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with patch(
            "textinsight.main.RepositoryFactory.create",
            return_value=_repositories("This is wonderful. I love it."),
        ):
            exit_code = main(["1", "--types", "sentiment", "keywords"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "sentiment: completed (" in out
        assert "keywords: completed (" in out

    @patch("textinsight.main.Log.configure")
    def test_failed_analysis_exits_non_zero(
        self, _configure: object, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with patch("textinsight.main.RepositoryFactory.create", return_value=_repositories("")):
            exit_code = main(["1", "--types", "readability"])

        assert exit_code == 1
        assert "readability: failed (" in capsys.readouterr().out

    @patch("textinsight.main.Log.configure")
    def test_unknown_document_exits_non_zero(self, _configure: object) -> None:
        with patch(
            "textinsight.main.RepositoryFactory.create",
            return_value=_repositories("Hello there."),
        ):
            assert main(["404"]) == 1

    @patch("textinsight.main.Log.configure")
    def test_unknown_type_exits_non_zero(self, _configure: object) -> None:
        with patch(
            "textinsight.main.RepositoryFactory.create",
            return_value=_repositories("Hello there."),
        ):
            assert main(["1", "--types", "topics"]) == 1

    @patch("textinsight.main.Log")
    def test_memory_backend_is_rejected(
        self,
        mock_log: MagicMock,
        postgres_backend: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("STORAGE_BACKEND", "memory")

        with patch("textinsight.main.RepositoryFactory.create") as mock_create:
            assert main(["1"]) == 1

        postgres_backend.assert_not_called()
        mock_create.assert_not_called()
        assert "STORAGE_BACKEND=postgres" in mock_log.error.call_args[0][0]
