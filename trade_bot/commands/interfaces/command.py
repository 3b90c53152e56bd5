from abc import ABC, abstractmethod
from typing import Dict
import logging
from .command_context import CommandContext
from .command_result import CommandResult


class Command(ABC):
    """
    Base interface for all slash commands handled by the bot.

    Commands encapsulate the workflow behind one slash command and can be
    executed independently of the Discord client. The executor owns the
    deferred acknowledgment and the terminal reply; a command only decides
    what that reply says.

    All commands must implement:
    - execute(): The main workflow
    - get_command_name(): Slash command name, also the registry key
    - get_description(): Description shown in the Discord client
    - validate_context(): Context validation before execution
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    async def execute(self, context: CommandContext) -> CommandResult:
        """
        Execute the command with the given context.

        Expected failures must be converted into a failure CommandResult
        carrying the reply for the invoker rather than raised.

        Args:
            context: CommandContext containing the invocation and dependencies

        Returns:
            CommandResult with execution status and terminal reply
        """
        pass

    @abstractmethod
    def get_command_name(self) -> str:
        """
        Return unique identifier for this command.

        This is the slash command name registered with Discord and the key
        used by the command registry.

        Returns:
            Unique command name string
        """
        pass

    @abstractmethod
    def get_description(self) -> str:
        pass

    @abstractmethod
    def validate_context(self, context: CommandContext) -> bool:
        """
        Validate that the context contains all required data for execution.

        Args:
            context: CommandContext to validate

        Returns:
            True if context is valid, False otherwise
        """
        pass

    def get_options(self) -> Dict[str, str]:
        """
        Return the required string options of the command, name to description.

        Insertion order is the order the options are registered in.
        """
        return {}

    def supports_retry(self) -> bool:
        """
        Return whether this command may be retried automatically on failure.

        Commands with external side effects must return False.
        """
        return False

    async def pre_execute_hook(self, context: CommandContext) -> None:
        """Hook called before command execution."""
        self.logger.info(
            f"Executing command '{self.get_command_name()}' "
            f"for invocation {context.invocation_id}"
        )

    async def post_execute_hook(
        self, context: CommandContext, result: CommandResult
    ) -> None:
        """Hook called after command execution."""
        status_msg = "successfully" if result.is_success() else "with errors"
        self.logger.info(
            f"Command '{self.get_command_name()}' completed {status_msg} "
            f"for invocation {context.invocation_id} "
            f"in {result.execution_time_ms:.2f}ms"
        )

    def __str__(self) -> str:
        """String representation of the command"""
        return f"{self.__class__.__name__}(name='{self.get_command_name()}')"

    def __repr__(self) -> str:
        """Detailed string representation of the command"""
        return (
            f"{self.__class__.__name__}("
            f"name='{self.get_command_name()}', "
            f"options={list(self.get_options())}, "
            f"supports_retry={self.supports_retry()}"
            f")"
        )
