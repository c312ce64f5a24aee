"""Command dispatch for the savings ledger.

`MessageBus.handle` is the single way operations reach the ledger. It looks
up the handler registered for the command's type, runs it and reports the
outcome as a `Result`:

- the handler's return value comes back as `Ok(value)`;
- a `DomainError` (a rule the command broke) comes back as `Err(code, message)`;
- anything else is logged with its traceback and propagates.
"""

import logging
from collections.abc import Callable

from savings_ledger.domain.errors import DomainError
from savings_ledger.interfaces.unit_of_work import AbstractUnitOfWork

from .commands import Command
from .results import Err, Ok, Result

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods

Handler = Callable[..., object]


class NoHandlerForCommand(LookupError):
    """No handler is registered for the command's type."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """Route ledger commands to their handlers.

    Handlers take the command as their only argument; the unit of work and
    interest policy are bound in beforehand by `bootstrap`. The bus keeps a
    reference to the same unit of work so callers can reach the store.

    Args:
        uow: Unit of work shared with the handlers.
        command_handlers: Handler for each command type.
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        command_handlers: dict[type[Command], Handler],
    ) -> None:
        self.uow = uow
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> Result:
        """Run `cmd` through its handler and return the outcome.

        Raises:
            NoHandlerForCommand: Nothing is registered for ``type(cmd)``.
            Exception: Whatever the handler raised, unless it was a DomainError.
        """
        handler = self._command_handlers.get(type(cmd))
        if handler is None:
            logger.error("No handler found for command %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd)

        handler_name = self._get_handler_name(handler)
        logger.debug("Handling command %s with handler %s", cmd, handler_name)
        try:
            value = handler(cmd)
        except DomainError as e:
            logger.info("Command %s rejected: %s", cmd, e)
            return Err(e.code, str(e))
        except Exception:  # pylint: disable=broad-except
            logger.exception(
                "Exception handling command %s with handler %s", cmd, handler_name
            )
            raise
        return Ok(value)

    @staticmethod
    def _get_handler_name(fn: Handler) -> str:
        # functools.partial exposes the wrapped function as .func
        name = getattr(fn, "__name__", None) or getattr(
            getattr(fn, "func", None), "__name__", None
        )
        return name or repr(fn)
