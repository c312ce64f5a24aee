"""Wire a ledger: store, unit of work, handlers and message bus."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from savings_ledger import config
from savings_ledger.adapters.ledger_store import InMemoryLedgerData, InMemoryLedgerStore
from savings_ledger.adapters.unit_of_work import InMemoryUnitOfWork
from savings_ledger.domain.value_objects import InterestPolicy
from savings_ledger.service_layer.handlers import COMMAND_HANDLERS
from savings_ledger.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from savings_ledger.interfaces.unit_of_work import AbstractUnitOfWork
    from savings_ledger.service_layer.commands import Command


@dataclass(frozen=True)
class AppContainer:
    """Everything a caller needs to drive one ledger."""

    message_bus: MessageBus
    store: InMemoryLedgerStore
    policy: InterestPolicy


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Bind the dependencies `handler` declares as keyword parameters.

    Only names present in the handler's signature are bound, so a handler
    that does not take ``policy`` never receives it.
    """
    params = inspect.signature(handler).parameters
    wanted = {name: dep for name, dep in dependencies.items() if name in params}
    return partial(handler, **wanted)


def build_message_bus(
    uow: AbstractUnitOfWork,
    command_handlers: dict[type[Command], Callable[..., object]],
    policy: InterestPolicy | None = None,
) -> MessageBus:
    """Return a bus whose handlers are bound to `uow` and `policy`."""
    dependencies = {"uow": uow, "policy": policy or InterestPolicy()}
    return MessageBus(
        uow,
        command_handlers={
            command_type: inject_dependencies(handler, dependencies)
            for command_type, handler in command_handlers.items()
        },
    )


def bootstrap(
    policy: InterestPolicy | None = None, data: InMemoryLedgerData | None = None
) -> AppContainer:
    """Bootstrap a ledger with its own store, unit of work and message bus.

    Every call returns an independent ledger; nothing is shared between
    containers.

    Args:
        policy: Interest terms to apply. Read from the environment when None.
        data: Seed state for the ledger. A fresh, empty ledger when None.

    Raises:
        InvalidConfigError: If `policy` is None and the environment holds
            invalid interest settings.
    """
    if policy is None:
        policy = config.get_interest_policy()
    store = InMemoryLedgerStore(data)
    uow = InMemoryUnitOfWork(store)
    return AppContainer(
        message_bus=build_message_bus(uow, COMMAND_HANDLERS, policy),
        store=store,
        policy=policy,
    )
