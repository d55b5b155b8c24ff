from .node_store import NodeStore, NodeConflictError, StorageError, generate_id

__all__ = ["NodeStore", "NodeConflictError", "StorageError", "generate_id"]
