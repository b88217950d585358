"""Server Registry for the MCP client.

Stores registered servers keyed by name. All access goes through one
reader/writer lock: mutations are exclusive, lookups are shared. Records
are frozen, so a lookup hands out the record itself as a snapshot.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

from shared.logging import get_logger
from shared.models import MCPServer, ToolDescriptor
from mcp_client.errors import ServerNotFoundError, ToolNotFoundError

logger = get_logger(__name__)


class ReadWriteLock:
    """
    Asyncio reader/writer lock.

    Any number of readers may hold the lock together; a writer holds it
    alone. Waiting writers block new readers so writers are not starved.
    """

    def __init__(self) -> None:
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        async with self._cond:
            await self._cond.wait_for(
                lambda: not self._writer and self._writers_waiting == 0
            )
            self._readers += 1
        try:
            yield
        finally:
            async with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        async with self._cond:
            self._writers_waiting += 1
            try:
                await self._cond.wait_for(lambda: not self._writer and self._readers == 0)
            except BaseException:
                # A cancelled writer must release the readers it was holding back
                self._writers_waiting -= 1
                self._cond.notify_all()
                raise
            self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            async with self._cond:
                self._writer = False
                self._cond.notify_all()


class ServerRegistry:
    """
    Registry of MCP servers and their capability snapshots.

    Responsibilities:
    - Insert, replace and remove servers
    - Toggle the enabled flag
    - Look up servers and tools
    """

    def __init__(self) -> None:
        self._servers: dict[str, MCPServer] = {}
        self._lock = ReadWriteLock()

    async def put(self, server: MCPServer) -> None:
        """Insert a server, replacing any record with the same name."""
        async with self._lock.write():
            replaced = server.name in self._servers
            self._servers[server.name] = server

        logger.info(
            "MCP server registered",
            server=server.name,
            endpoint=server.endpoint,
            tool_count=len(server.tools),
            resource_count=len(server.resources),
            enabled=server.enabled,
            replaced=replaced
        )

    async def remove(self, name: str) -> bool:
        """
        Remove a server.

        Returns:
            True if a server was removed, False if none was registered
        """
        async with self._lock.write():
            removed = self._servers.pop(name, None) is not None

        if removed:
            logger.info("MCP server removed", server=name)
        return removed

    async def set_enabled(self, name: str, enabled: bool) -> None:
        """
        Enable or disable a server.

        Raises:
            ServerNotFoundError: If no server has this name
        """
        async with self._lock.write():
            server = self._servers.get(name)
            if server is None:
                raise ServerNotFoundError(name)
            self._servers[name] = server.model_copy(update={"enabled": enabled})

        logger.info("MCP server enabled" if enabled else "MCP server disabled", server=name)

    async def names(self) -> list[str]:
        """List registered server names."""
        async with self._lock.read():
            return list(self._servers)

    async def get(self, name: str) -> MCPServer:
        """
        Get a server record.

        Raises:
            ServerNotFoundError: If no server has this name
        """
        async with self._lock.read():
            server = self._servers.get(name)
        if server is None:
            raise ServerNotFoundError(name)
        return server

    async def get_tool(self, server_name: str, tool_name: str) -> ToolDescriptor:
        """
        Get a tool from a server's snapshot.

        Raises:
            ServerNotFoundError: If no server has this name
            ToolNotFoundError: If the server did not advertise the tool
        """
        server = await self.get(server_name)
        tool = server.find_tool(tool_name)
        if tool is None:
            raise ToolNotFoundError(server_name, tool_name)
        return tool
