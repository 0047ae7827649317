"""Locate the nvim instance that belongs to an editor frame.

neovide (or a terminal) is the niri window; nvim itself is one of its
descendants and listens on ``/run/user/<uid>/nvim.<pid>.0``. The process tree
is searched depth-first, parent before children, and the first socket that
accepts a connection wins.
"""

import os
from collections.abc import Callable, Iterator

import psutil

from niriglue import config
from niriglue.errors import NotFoundError, TransportError

from ...telemetry import get_logger
from .client import NvimClient

logger = get_logger(__name__)


def socket_path_for(pid: int, uid: int | None = None) -> str:
    return config.NVIM_SOCKET_TEMPLATE.format(
        uid=os.geteuid() if uid is None else uid,
        pid=pid,
    )


def walk_process_tree(pid: int) -> Iterator[int]:
    """Yield ``pid`` and its descendants in depth-first pre-order.

    Raises:
        NotFoundError: ``pid`` is gone or its children can not be read
    """
    try:
        process = psutil.Process(pid)
        children = process.children()
    except psutil.NoSuchProcess as e:
        raise NotFoundError(f"Process {pid} does not exist") from e
    except psutil.Error as e:
        raise NotFoundError(f"Can not inspect process {pid}: {e}") from e
    yield pid
    for child in children:
        try:
            yield from walk_process_tree(child.pid)
        except NotFoundError:
            # exited while we were walking
            continue


def find_nvim_session(
    pid: int,
    attach: Callable[[str], NvimClient] = NvimClient.attach,
) -> NvimClient:
    """Return a live client for the nvim running under process ``pid``.

    Raises:
        NotFoundError: no process in the tree exposes a usable socket
    """
    for candidate in walk_process_tree(pid):
        path = socket_path_for(candidate)
        try:
            client = attach(path)
        except TransportError as e:
            logger.debug(f"[Discovery] {path}: {e}")
            continue
        logger.info(f"[Discovery] Found nvim session at {path}")
        return client
    raise NotFoundError(f"No nvim session found under process {pid}")
