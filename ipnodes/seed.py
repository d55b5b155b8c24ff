"""
Seed a running node service with public IPv4 addresses.

Each address is sent as the client address through X-Forwarded-For,
exactly as a reverse proxy would, so the service resolves and places
it the same way it handles real traffic.

Usage
-----
ipnodes-seed --base-url http://localhost:8080/v1 --delay 0.1
"""

import argparse
import logging
import time
from typing import Any, Dict, Iterable, List, Optional

import requests

logger = logging.getLogger(__name__)


SEED_ADDRESSES = [
    # AWS US East
    "3.5.140.0",
    "3.5.141.0",
    "3.5.142.0",
    # AWS US West
    "13.56.0.0",
    "13.57.0.0",
    "13.58.0.0",
    # Google Cloud
    "34.95.0.0",
    "34.96.0.0",
    "34.97.0.0",
    # Azure
    "20.0.0.0",
    "20.1.0.0",
    "20.2.0.0",
    # Digital Ocean
    "143.198.0.0",
    "143.198.1.0",
    "143.198.2.0",
    # Public DNS
    "8.8.8.8",
    "1.1.1.1",
    "9.9.9.9",
    "208.67.222.222",
]


class Seeder:
    """
    Posts one node per address to the service.

    Failures are logged and skipped; seeding continues with the
    next address.
    """

    def __init__(
        self,
        base_url: str,
        delay_seconds: float = 0.1,
        timeout_seconds: int = 10,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.delay_seconds = delay_seconds
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def seed(self, addresses: Iterable[str] = SEED_ADDRESSES) -> List[Dict[str, Any]]:
        created = []

        for i, ip in enumerate(addresses):
            node = self.create(f"Node-{i + 1}", ip)
            if node is not None:
                created.append(node)

            if self.delay_seconds:
                time.sleep(self.delay_seconds)

        logger.info("[SEED] Completed | created=%d", len(created))
        return created

    def create(self, name: str, ip: str) -> Optional[Dict[str, Any]]:
        url = f"{self.base_url}/nodes"

        try:
            response = self.session.post(
                url,
                json={"name": name},
                headers={"X-Forwarded-For": ip},
                timeout=self.timeout_seconds,
            )
        except requests.exceptions.RequestException as e:
            logger.warning("[SEED] Request failed | ip=%s error=%s", ip, e)
            return None

        if response.status_code != 200:
            logger.warning(
                "[SEED] Node rejected | ip=%s status=%d body=%s",
                ip,
                response.status_code,
                response.text,
            )
            return None

        try:
            node = response.json()
        except ValueError:
            logger.warning("[SEED] Invalid JSON response | ip=%s", ip)
            return None

        logger.info(
            "[SEED] Node created | name=%s ip=%s position=%s",
            node.get("name"),
            node.get("ip"),
            node.get("position"),
        )
        return node


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the node service with test nodes.")
    parser.add_argument("--base-url", default="http://localhost:8080/v1")
    parser.add_argument("--delay", type=float, default=0.1)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    Seeder(args.base_url, delay_seconds=args.delay).seed()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
