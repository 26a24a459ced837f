"""Pick a random usable Invidious instance, consulting the local cache first."""

from __future__ import annotations

import random
from typing import List

from .cache import CacheStore
from .client import InvidiousClient
from .errors import NoInstancesError
from .logging_utils import get_logger
from .models import Instance


def usable_uris(instances: List[Instance]) -> List[str]:
    return [inst.uri.rstrip("/") for inst in instances if inst.usable]


class InstanceResolver:
    def __init__(
        self,
        client: InvidiousClient,
        cache: CacheStore,
        directory_url: str,
        rng: random.Random | None = None,
    ):
        self._client = client
        self._cache = cache
        self._directory_url = directory_url
        self._rng = rng or random.Random()
        self._log = get_logger()

    def instances(self) -> List[str]:
        cached = self._cache.load()
        if cached is not None:
            self._log.debug("Using %d cached instances", len(cached))
            return cached
        self._log.info("Refreshing instance list from %s", self._directory_url)
        uris = usable_uris(self._client.fetch_instances(self._directory_url))
        if uris:
            self._cache.save(uris)
        return uris

    def resolve(self) -> str:
        uris = self.instances()
        if not uris:
            raise NoInstancesError(
                f"no usable instances (http(s) with API enabled) listed at {self._directory_url}"
            )
        choice = self._rng.choice(uris)
        self._log.info("Using instance %s", choice)
        return choice


__all__ = ["InstanceResolver", "usable_uris"]
