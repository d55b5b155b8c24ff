from __future__ import annotations

from typing import Callable, Dict, List, Optional
from threading import RLock
from pathlib import Path
import json
import os
import logging
import secrets
import string

from ..models import Node
from ..placement import PlacementEngine

logger = logging.getLogger(__name__)


ID_ALPHABET = string.ascii_letters + string.digits
ID_LENGTH = 8


def generate_id(length: int = ID_LENGTH) -> str:
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


class NodeConflictError(Exception):
    """Raised when a node name or address is already taken."""
    pass


class StorageError(Exception):
    """Raised when the node set cannot be read from or written to disk."""
    pass


class NodeStore:
    """
    Authoritative set of placed nodes.

    Placement reads the full node set, computes a position and
    persists the new node. The whole sequence runs under one lock,
    so concurrent creates always see each other's results.

    An unreadable storage file raises StorageError at construction
    and is left untouched on disk.
    """

    MAX_ID_ATTEMPTS = 16

    def __init__(
        self,
        storage_path: Optional[str] = None,  # None → memory only
        engine: Optional[PlacementEngine] = None,
        id_factory: Callable[[], str] = generate_id,
    ) -> None:
        self._nodes: Dict[str, Node] = {}
        self._lock = RLock()
        self._storage = Path(storage_path) if storage_path else None
        self._engine = engine or PlacementEngine()
        self._id_factory = id_factory

        self._load_from_disk()

    # ==========================================================
    # Lookup
    # ==========================================================

    def list_nodes(self) -> List[Node]:
        with self._lock:
            return list(self._nodes.values())

    def get(self, node_id: str) -> Node:
        with self._lock:
            if node_id not in self._nodes:
                raise KeyError(f"Node '{node_id}' not found.")
            return self._nodes[node_id]

    def find_by_name(self, name: str) -> Optional[Node]:
        with self._lock:
            return next((n for n in self._nodes.values() if n.name == name), None)

    def find_by_ip(self, ip: str) -> Optional[Node]:
        with self._lock:
            return next((n for n in self._nodes.values() if n.ip == ip), None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._nodes)

    # ==========================================================
    # Creation
    # ==========================================================

    def create_node(self, name: str, raw_address: str) -> Node:
        """
        Validate, place and persist a new node.

        Raises
        ------
        AddressValidationError
            The address was rejected by the placement engine.

        NodeConflictError
            The name or validated address is already in use.

        StorageError
            The node could not be persisted. The in-memory set is
            left unchanged.
        """

        with self._lock:
            address = self._engine.validator.validate(raw_address)

            if self.find_by_name(name) is not None:
                logger.info("[NODE STORE] Name already taken | name=%s", name)
                raise NodeConflictError("Node name already taken")

            if self.find_by_ip(address) is not None:
                logger.info("[NODE STORE] Address already placed | ip=%s", address)
                raise NodeConflictError("IP node already exists")

            placement = self._engine.place(
                address,
                [n.position for n in self._nodes.values()],
            )

            node = Node(
                id=self._new_id(),
                name=name,
                ip=placement.address,
                position=placement.point,
            )

            self._nodes[node.id] = node
            try:
                self._save_to_disk()
            except StorageError:
                del self._nodes[node.id]
                raise

            logger.info(
                "[NODE STORE] Node created | id=%s ip=%s position=%s",
                node.id,
                node.ip,
                node.position.as_tuple(),
            )

            return node

    def _new_id(self) -> str:
        for _ in range(self.MAX_ID_ATTEMPTS):
            node_id = self._id_factory()
            if node_id not in self._nodes:
                return node_id

        raise RuntimeError(
            f"Could not generate a unique node id after {self.MAX_ID_ATTEMPTS} attempts"
        )

    # ==========================================================
    # Persistence
    # ==========================================================

    def _save_to_disk(self) -> None:
        if self._storage is None:
            return

        data = [node.to_dict() for node in self._nodes.values()]
        staging = self._storage.with_name(self._storage.name + ".tmp")

        # The live file is only ever swapped whole, never truncated in place.
        try:
            with staging.open("w") as f:
                json.dump(data, f, indent=2)
            os.replace(staging, self._storage)
        except OSError as e:
            staging.unlink(missing_ok=True)
            logger.error(f"[NODE STORE] Failed to persist: {e}")
            raise StorageError(f"Failed to persist nodes: {e}")

    def _load_from_disk(self) -> None:
        if self._storage is None or not self._storage.exists():
            return

        try:
            with self._storage.open() as f:
                data = json.load(f)

            if not isinstance(data, list):
                raise TypeError(f"expected a list of nodes, got {type(data).__name__}")

            loaded: Dict[str, Node] = {}
            for entry in data:
                node = Node.from_dict(entry)
                loaded[node.id] = node

        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.error(f"[NODE STORE] Failed to load from disk: {e}")
            raise StorageError(f"Failed to load nodes from {self._storage}: {e}")

        self._nodes = loaded
        logger.info("[NODE STORE] Loaded persisted nodes | count=%d", len(self._nodes))
