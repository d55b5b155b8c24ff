from ipnodes.config import ServiceConfig
from ipnodes.placement import PlacementEngine
from ipnodes.storage import NodeStore


class NodeServiceApp:
    """
    Server-owned application assembler.

    This class wires together:
        PlacementEngine
        NodeStore
    """

    @staticmethod
    def create(config: ServiceConfig) -> NodeStore:
        engine = PlacementEngine()
        return NodeStore(storage_path=config.storage_path, engine=engine)
