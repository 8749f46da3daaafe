"""Project workspace: entry tree plus hex view."""

import zipfile

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QLabel,
    QSplitter,
    QStyle,
    QTreeWidget,
    QTreeWidgetItem,
    QVBoxLayout,
    QWidget,
)

from ..hex import HexWorkspace, MemoryByteSource, ProjectByteSource
from ..project import ProjectNotFound, ProjectRegistry, ProjectType
from ..utils import log_buffer, run_in_thread


def build_directory_tree(files: list[str]) -> dict:
    """Nest '/'-separated names; files map to None, folders to dicts."""
    tree: dict = {}
    for file in files:
        parts = [part for part in file.split('/') if part]
        current = tree
        for index, part in enumerate(parts):
            if index == len(parts) - 1:
                current.setdefault(part, None)
            else:
                node = current.get(part)
                if node is None:
                    node = current[part] = {}
                current = node
    return tree


class ProjectWorkspace(QWidget):
    """Shows the open project; every entry opens in the hex workspace."""

    entry_loaded = pyqtSignal(str, object)
    entry_failed = pyqtSignal(str, str)

    def __init__(self, registry: ProjectRegistry, config_manager, fetcher=None, parent=None):
        super().__init__(parent)
        self.registry = registry
        self.config_manager = config_manager
        self.project_id: str | None = None
        self._selected_entry: str | None = None
        self._setup_ui(fetcher)

        self.entry_loaded.connect(self._on_entry_loaded)
        self.entry_failed.connect(self._on_entry_failed)

    def _setup_ui(self, fetcher):
        """Setup the UI."""
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)

        self.splitter = QSplitter(Qt.Orientation.Horizontal)

        # Left side: project explorer
        explorer = QWidget()
        explorer_layout = QVBoxLayout()
        explorer_layout.setContentsMargins(4, 4, 4, 4)
        self.project_label = QLabel('Project')
        self.project_label.setStyleSheet('font-weight: bold;')
        explorer_layout.addWidget(self.project_label)
        self.tree = QTreeWidget()
        self.tree.setHeaderHidden(True)
        self.tree.itemClicked.connect(self._on_item_clicked)
        explorer_layout.addWidget(self.tree)
        explorer.setLayout(explorer_layout)
        self.explorer = explorer
        self.splitter.addWidget(explorer)

        # Right side: content
        self.hex_workspace = HexWorkspace(
            fetcher,
            page_size=self.config_manager.page_size,
            threshold=self.config_manager.near_end_threshold,
            timeout_ms=self.config_manager.fetch_timeout_ms,
        )
        self.splitter.addWidget(self.hex_workspace)
        self.splitter.setSizes([250, 750])

        layout.addWidget(self.splitter)
        self.setLayout(layout)

    def load_project(self, project_id: str):
        """Populate the workspace for a project in the registry.

        Everything that can fail runs before any widget is touched, so a
        failed load leaves the previous project on screen.
        """
        project = self.registry.get(project_id)
        files = None
        if project.type is not ProjectType.HEX:
            files = self.registry.list_files(project_id)

        self.project_id = project_id
        self._selected_entry = None
        self.project_label.setText(f'{project.type.value}: {project.name}')
        self.tree.clear()

        if files is None:
            self.explorer.hide()
            self.hex_workspace.open_source(
                ProjectByteSource(self.registry, project_id),
                project.name,
                page_size=self.config_manager.page_size,
            )
            return

        self.explorer.show()
        self.hex_workspace.close_source()
        self._populate_tree(self.tree.invisibleRootItem(), build_directory_tree(files), '')
        log_buffer.log('Project', f'Listed {len(files)} entries in {project.name}')

    def clear(self):
        self.project_id = None
        self._selected_entry = None
        self.tree.clear()
        self.hex_workspace.close_source()

    def _populate_tree(self, parent: QTreeWidgetItem, tree: dict, path: str):
        style = self.style()
        # Folders first, then files, each alphabetically
        for name in sorted(tree, key=lambda key: (tree[key] is None, key.lower())):
            full_path = f'{path}/{name}' if path else name
            item = QTreeWidgetItem([name])
            if tree[name] is None:
                item.setIcon(0, style.standardIcon(QStyle.StandardPixmap.SP_FileIcon))
                item.setData(0, Qt.ItemDataRole.UserRole, full_path)
            else:
                item.setIcon(0, style.standardIcon(QStyle.StandardPixmap.SP_DirIcon))
                self._populate_tree(item, tree[name], full_path)
            parent.addChild(item)

    def _on_item_clicked(self, item: QTreeWidgetItem, _column: int):
        entry = item.data(0, Qt.ItemDataRole.UserRole)
        if not entry or self.project_id is None:
            return
        self._selected_entry = entry
        self._load_entry(self.project_id, entry)

    @run_in_thread
    def _load_entry(self, project_id: str, entry: str):
        """Read an entry in the background."""
        try:
            data = self.registry.read_file(project_id, entry)
        except (ProjectNotFound, OSError, zipfile.BadZipFile) as e:
            self.entry_failed.emit(entry, str(e))
            return
        self.entry_loaded.emit(entry, data)

    def _on_entry_loaded(self, entry: str, data: bytes):
        if entry != self._selected_entry:
            return
        self.hex_workspace.open_source(
            MemoryByteSource(data, entry),
            entry,
            page_size=self.config_manager.page_size,
        )

    def _on_entry_failed(self, entry: str, message: str):
        log_buffer.log('Project', f'Failed to read {entry}: {message}')
        if entry == self._selected_entry:
            self.hex_workspace.close_source()
            self.hex_workspace.status_label.setText(f'Failed to read {entry}: {message}')
