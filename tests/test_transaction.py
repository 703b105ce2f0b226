"""
Tests for write transactions and the startup lifecycle.
"""

import pytest
from unittest.mock import Mock

from struts2scaffold.errors import TransactionError
from struts2scaffold.project import StartupManager, TransactionManager


class TestWriteAction:
    """Tests for TransactionManager.write_action."""

    def test_commit_keeps_changes(self, tmp_path):
        manager = TransactionManager()
        created = tmp_path / "struts.xml"

        with manager.write_action("create") as tx:
            created.write_text("<struts/>", encoding="utf-8")
            tx.track_created(created)

        assert created.exists()
        assert tx.committed
        assert manager.current is None

    def test_rollback_removes_created_files(self, tmp_path):
        manager = TransactionManager()
        created = tmp_path / "struts.xml"

        with pytest.raises(RuntimeError):
            with manager.write_action("create") as tx:
                created.write_text("<struts/>", encoding="utf-8")
                tx.track_created(created)
                raise RuntimeError("boom")

        assert not created.exists()
        assert tx.rolled_back
        assert tx.rollback_errors == []

    def test_rollback_removes_created_empty_directory(self, tmp_path):
        manager = TransactionManager()
        state_dir = tmp_path / ".struts2"
        state_file = state_dir / "facet.yaml"

        with pytest.raises(RuntimeError):
            with manager.write_action("save state") as tx:
                tx.track_created(state_dir)
                tx.backup(state_file)
                state_dir.mkdir()
                state_file.write_text("file_sets: []\n", encoding="utf-8")
                raise RuntimeError("boom")

        assert not state_dir.exists()
        assert tx.rollback_errors == []

    def test_rollback_keeps_non_empty_directory(self, tmp_path):
        manager = TransactionManager()
        state_dir = tmp_path / ".struts2"

        with pytest.raises(RuntimeError):
            with manager.write_action("save state") as tx:
                tx.track_created(state_dir)
                state_dir.mkdir()
                (state_dir / "notes.txt").write_text("keep", encoding="utf-8")
                raise RuntimeError("boom")

        assert (state_dir / "notes.txt").exists()

    def test_rollback_restores_backups(self, tmp_path):
        manager = TransactionManager()
        web_xml = tmp_path / "web.xml"
        web_xml.write_text("original", encoding="utf-8")
        new_file = tmp_path / "facet.yaml"

        with pytest.raises(ValueError):
            with manager.write_action("edit") as tx:
                tx.backup(web_xml)
                web_xml.write_text("changed", encoding="utf-8")
                tx.backup(new_file)
                new_file.write_text("state", encoding="utf-8")
                raise ValueError("boom")

        assert web_xml.read_text(encoding="utf-8") == "original"
        assert not new_file.exists()

    def test_first_backup_wins(self, tmp_path):
        manager = TransactionManager()
        path = tmp_path / "web.xml"
        path.write_text("v1", encoding="utf-8")

        with pytest.raises(ValueError):
            with manager.write_action("edit") as tx:
                tx.backup(path)
                path.write_text("v2", encoding="utf-8")
                tx.backup(path)
                path.write_text("v3", encoding="utf-8")
                raise ValueError("boom")

        assert path.read_text(encoding="utf-8") == "v1"

    def test_undo_actions_run_in_reverse(self):
        manager = TransactionManager()
        calls = []

        with pytest.raises(ValueError):
            with manager.write_action("edit") as tx:
                tx.on_rollback(lambda: calls.append("first"))
                tx.on_rollback(lambda: calls.append("second"))
                raise ValueError("boom")

        assert calls == ["second", "first"]

    def test_failing_undo_is_recorded(self):
        manager = TransactionManager()
        later = Mock()

        with pytest.raises(ValueError):
            with manager.write_action("edit") as tx:
                tx.on_rollback(later)
                tx.on_rollback(Mock(side_effect=OSError("disk")), "restore state")
                raise ValueError("boom")

        later.assert_called_once()
        assert tx.rollback_errors == ["restore state: disk"]

    def test_commit_actions_only_on_success(self):
        manager = TransactionManager()
        action = Mock()

        with pytest.raises(ValueError):
            with manager.write_action("edit") as tx:
                tx.on_commit(action)
                raise ValueError("boom")
        action.assert_not_called()

        with manager.write_action("edit") as tx:
            tx.on_commit(action)
        action.assert_called_once()

    def test_nesting_rejected(self):
        manager = TransactionManager()
        with manager.write_action("outer"):
            with pytest.raises(TransactionError):
                with manager.write_action("inner"):
                    pass

    def test_closed_transaction_rejects_changes(self, tmp_path):
        manager = TransactionManager()
        with manager.write_action("edit") as tx:
            pass
        with pytest.raises(TransactionError):
            tx.track_created(tmp_path / "late.xml")


class TestStartupManager:
    """Tests for run-when-initialized hooks."""

    def test_hooks_wait_for_initialization(self):
        startup = StartupManager("shop")
        hook = Mock()

        startup.run_when_project_initialized(hook)
        hook.assert_not_called()
        assert startup.pending_count == 1

        startup.mark_initialized()
        hook.assert_called_once()

    def test_hooks_run_once_in_order(self):
        startup = StartupManager("shop")
        calls = []
        startup.run_when_project_initialized(lambda: calls.append(1))
        startup.run_when_project_initialized(lambda: calls.append(2))

        startup.mark_initialized()
        startup.mark_initialized()
        assert calls == [1, 2]

    def test_after_initialization_runs_immediately(self):
        startup = StartupManager("shop")
        startup.mark_initialized()
        hook = Mock()
        startup.run_when_project_initialized(hook)
        hook.assert_called_once()

    def test_dispose_drops_pending_hooks(self):
        startup = StartupManager("shop")
        hook = Mock()
        startup.run_when_project_initialized(hook)

        startup.dispose()
        startup.mark_initialized()
        startup.run_when_project_initialized(hook)
        hook.assert_not_called()

    def test_failing_hook_does_not_block_later_hooks(self, caplog):
        startup = StartupManager("shop")
        later = Mock()
        startup.run_when_project_initialized(Mock(side_effect=RuntimeError("broken")))
        startup.run_when_project_initialized(later)

        startup.mark_initialized()

        later.assert_called_once()
        assert startup.pending_count == 0
        assert "Startup hook" in caplog.text
