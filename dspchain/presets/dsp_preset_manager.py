"""
DSP preset controller - catalog loading and the editor-facing operations.

Catalog layout on disk (under the config dir):
    dspconfig               live chain, header "<type> <enabled> {"
    presets/dsp/**/*.txt    named chains, header "<type> {"

The live chain becomes the preset named "current" at index 0; named presets
follow in directory enumeration order.
"""

import os
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Tuple, Union

from PyQt5.QtCore import QObject, pyqtSignal

from dspchain.config import (
    CURRENT_PRESET_NAME,
    PRESET_DOMAIN,
    PRESET_SUFFIX,
    UNKNOWN_PLUGIN_NAME,
)
from dspchain.plugins.registry import PluginRegistry
from dspchain.utils.app_paths import get_config_dir, get_current_preset_path, get_presets_dir
from dspchain.utils.logger import logger
from .dsp_format import load_preset_file
from .dsp_preset_schema import DSPNode, DSPPreset
from .errors import AlreadyLoadedError, EmptyCatalogError, PresetError


def iter_preset_entries(root: Path) -> Iterator[str]:
    """
    Yield every file under root as a POSIX relative path, sorted.

    A missing or unreadable root yields nothing.
    """
    root = Path(root)
    if not root.is_dir():
        return

    entries = []
    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = Path(dirpath).relative_to(root)
        for filename in filenames:
            entries.append((rel_dir / filename).as_posix())

    yield from sorted(entries)


def _always(index: int) -> bool:
    return True


class DSPPresetController(QObject):
    """
    Owns the DSP preset catalog.

    Signals:
        catalog_loaded(int): load() finished, with the preset count
        item_added(DSPNode): add_item() appended a node to the current preset

    Usage:
        controller = DSPPresetController(registry)
        controller.load()
        controller.add_item("eq")
        for preset in controller.presets:
            ...
    """

    catalog_loaded = pyqtSignal(int)
    item_added = pyqtSignal(object)

    domain = PRESET_DOMAIN

    def __init__(
        self,
        registry: PluginRegistry,
        context: str = "",
        config_dir: Union[Path, str, Callable[[], Path], None] = None,
        list_entries: Optional[Callable[[Path], Iterable[str]]] = None,
        editable: Optional[Callable[[int], bool]] = None,
        saveable: Optional[Callable[[int], bool]] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.registry = registry
        self.context = context

        if config_dir is None:
            self._config_dir = get_config_dir
        elif callable(config_dir):
            self._config_dir = config_dir
        else:
            fixed = Path(config_dir)
            self._config_dir = lambda: fixed

        self._list_entries = list_entries or iter_preset_entries
        self._editable = editable or _always
        self._saveable = saveable or _always

        self._presets: List[DSPPreset] = []

    @classmethod
    def create(cls, registry: PluginRegistry, context: str = "", **kwargs) -> "DSPPresetController":
        """Construct and load in one step."""
        controller = cls(registry, context=context, **kwargs)
        controller.load()
        return controller

    # === Catalog access ===

    @property
    def presets(self) -> Tuple[DSPPreset, ...]:
        return tuple(self._presets)

    @property
    def current_preset(self) -> Optional[DSPPreset]:
        """First preset in the catalog, None before load."""
        return self._presets[0] if self._presets else None

    def count(self) -> int:
        return len(self._presets)

    def get_preset(self, index: int) -> DSPPreset:
        return self._presets[index]

    def to_dicts(self) -> List[dict]:
        return [preset.to_dict() for preset in self._presets]

    # === Editor policy ===

    def is_editable(self, index: int) -> bool:
        return self._editable(index)

    def is_saveable(self, index: int) -> bool:
        return self._saveable(index)

    # === Plugin lookups ===

    def get_item_types(self) -> List[str]:
        return list(self.registry.list_types())

    def get_item_name(self, type_id: str) -> str:
        name = self.registry.name_for_type(type_id)
        if name is None:
            return UNKNOWN_PLUGIN_NAME
        return name

    def add_item(self, type_id: str) -> DSPNode:
        """
        Append an empty, flag-less node of type_id to the current preset.

        The node has no values; the unit falls back to its defaults for
        every parameter.

        Raises:
            EmptyCatalogError: Nothing loaded yet
        """
        if not self._presets:
            raise EmptyCatalogError()

        node = DSPNode(type=type_id, name=self.get_item_name(type_id))
        self._presets[0].nodes.append(node)
        logger.preset(f"Added '{type_id}' to '{self._presets[0].name}'")
        self.item_added.emit(node)
        return node

    # === Load / save ===

    def load(self) -> None:
        """
        Populate the catalog from disk. Runs once per controller.

        A missing dspconfig or presets dir is skipped. Any read or parse
        error aborts the load; presets appended before it stay in place.

        Raises:
            AlreadyLoadedError: Catalog is not empty
            InvalidPresetError: A preset file is malformed
            PresetReadError: A preset file exists but cannot be read
        """
        if self._presets:
            raise AlreadyLoadedError(len(self._presets))

        config_dir = Path(self._config_dir())

        current_path = get_current_preset_path(config_dir)
        if current_path.exists():
            self._presets.append(
                self._load_preset(CURRENT_PRESET_NAME, current_path, has_enabled_flag=True)
            )
        else:
            logger.preset("No current DSP config, skipping", details=str(current_path))

        presets_dir = get_presets_dir(config_dir)
        for entry in self._list_entries(presets_dir):
            if not entry.endswith(PRESET_SUFFIX):
                continue
            name = entry[:-len(PRESET_SUFFIX)]
            self._presets.append(
                self._load_preset(name, presets_dir / entry, has_enabled_flag=False)
            )

        logger.info(f"Loaded {len(self._presets)} DSP presets", component="PRESET",
                    details=self.context or None)
        self.catalog_loaded.emit(len(self._presets))

    def save(self) -> None:
        """
        Write the whole catalog back: preset 0 to dspconfig, the rest to
        presets/dsp/<name>.txt.

        Not supported yet.
        """
        raise NotImplementedError("Saving DSP presets is not supported")

    def save_preset(self, index: int) -> None:
        """Write one preset back to its source location. Not supported yet."""
        raise NotImplementedError("Saving DSP presets is not supported")

    def _load_preset(self, name: str, path: Path, has_enabled_flag: bool) -> DSPPreset:
        try:
            preset = load_preset_file(name, path, has_enabled_flag)
        except PresetError as e:
            logger.error(f"Failed to load preset '{name}'", component="PRESET", details=str(e))
            raise
        logger.preset(f"Loaded '{name}' ({len(preset.nodes)} nodes)", details=str(path))
        return preset
