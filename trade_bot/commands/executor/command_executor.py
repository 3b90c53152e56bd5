import time
from typing import Any, Dict
import logging
from trade_bot.commands.interfaces.command import Command
from trade_bot.commands.interfaces.command_context import CommandContext
from trade_bot.commands.interfaces.command_result import CommandResult
from trade_bot.commands.interfaces.invocation import Invocation
from trade_bot.commands.registry.command_registry import CommandRegistry
from trade_bot.config.constants import UNEXPECTED_ERROR_MESSAGE


logger = logging.getLogger(__name__)


class CommandExecutor:
    """
    Runs one command invocation from acknowledgment to terminal reply.

    For every invocation the executor:
    - defers the response before any work, so Discord does not expire it
    - executes the command, converting unexpected exceptions into a
      failure result
    - sends exactly one terminal reply taken from the result

    Nothing is retried: a trader re-runs the command to try again.
    """

    def __init__(self, command_registry: CommandRegistry):
        """
        Initialize command executor.

        Args:
            command_registry: Registry for creating command instances
        """
        logger.info("Initializing CommandExecutor")

        self._command_registry = command_registry

        # Track execution metrics
        self._execution_count = 0
        self._success_count = 0
        self._failure_count = 0
        self._reply_failure_count = 0
        self._total_execution_time = 0.0

    @property
    def command_registry(self) -> CommandRegistry:
        return self._command_registry

    async def execute_command(
        self, command_name: str, context: CommandContext
    ) -> CommandResult:
        """
        Execute a command and deliver its terminal reply.

        Args:
            command_name: Name of the command to execute
            context: Execution context with the invocation and dependencies

        Returns:
            CommandResult whose reply_content was sent to the invoker
        """
        start_time = time.time()
        self._execution_count += 1

        logger.info(
            f"Starting execution of command '{command_name}' "
            f"for invocation {context.invocation_id}"
        )

        await self._defer(context.invocation, context.invocation_id)

        try:
            command = self._command_registry.create_command(command_name, context)
            result = await self._execute(command, context)
        except Exception as e:
            execution_time = (time.time() - start_time) * 1000
            logger.error(
                f"Command '{command_name}' raised exception "
                f"for invocation {context.invocation_id}: {str(e)}",
                exc_info=True,
            )
            result = CommandResult.failure(
                invocation_id=context.invocation_id,
                command_name=command_name,
                reply_content=UNEXPECTED_ERROR_MESSAGE,
                error_message=str(e),
                execution_time_ms=execution_time,
                error_details={"exception_type": type(e).__name__},
            )

        await self._send_terminal_reply(
            context.invocation, context.invocation_id, result.reply_content
        )
        self._record(result, start_time)
        return result

    async def reject_invocation(
        self,
        command_name: str,
        invocation: Invocation,
        invocation_id: str,
        reply_content: str,
        error_message: str,
    ) -> CommandResult:
        """
        Answer an invocation that cannot be turned into a CommandContext.

        The invocation is still deferred and receives exactly one reply.

        Returns:
            Failure CommandResult whose reply_content was sent to the invoker
        """
        start_time = time.time()
        self._execution_count += 1

        logger.error(
            f"Rejecting command '{command_name}' "
            f"for invocation {invocation_id}: {error_message}"
        )

        await self._defer(invocation, invocation_id)

        result = CommandResult.failure(
            invocation_id=invocation_id,
            command_name=command_name,
            reply_content=reply_content,
            error_message=error_message,
            execution_time_ms=(time.time() - start_time) * 1000,
            error_details={"error_type": "InvalidContext"},
        )
        await self._send_terminal_reply(invocation, invocation_id, reply_content)
        self._record(result, start_time)
        return result

    async def _defer(self, invocation: Invocation, invocation_id: str) -> None:
        try:
            await invocation.defer()
        except Exception as e:
            # The reply is still attempted; Discord decides whether the
            # interaction is usable
            logger.warning(f"Failed to defer invocation {invocation_id}: {str(e)}")

    def _record(self, result: CommandResult, start_time: float) -> None:
        self._total_execution_time += (time.time() - start_time) * 1000
        if result.is_success():
            self._success_count += 1
        else:
            self._failure_count += 1

    async def _execute(self, command: Command, context: CommandContext) -> CommandResult:
        """Execute command with its hooks"""
        await command.pre_execute_hook(context)

        start_time = time.time()
        result = await command.execute(context)

        # Update result with actual execution time if not set
        if result.execution_time_ms == 0:
            result.execution_time_ms = (time.time() - start_time) * 1000

        await command.post_execute_hook(context, result)
        return result

    async def _send_terminal_reply(
        self, invocation: Invocation, invocation_id: str, reply_content: str
    ) -> None:
        try:
            await invocation.reply(reply_content)
        except Exception as e:
            self._reply_failure_count += 1
            logger.error(
                f"Failed to reply to invocation {invocation_id}: {str(e)}",
                exc_info=True,
            )

    def get_execution_metrics(self) -> Dict[str, Any]:
        """
        Get execution metrics for monitoring and debugging.

        Returns:
            Dictionary containing execution statistics
        """
        avg_execution_time = (
            self._total_execution_time / self._execution_count
            if self._execution_count > 0
            else 0
        )

        success_rate = (
            (self._success_count / self._execution_count) * 100
            if self._execution_count > 0
            else 0
        )

        return {
            "total_executions": self._execution_count,
            "successful_executions": self._success_count,
            "failed_executions": self._failure_count,
            "failed_replies": self._reply_failure_count,
            "success_rate_percent": round(success_rate, 2),
            "average_execution_time_ms": round(avg_execution_time, 2),
            "total_execution_time_ms": round(self._total_execution_time, 2),
        }

    def reset_metrics(self) -> None:
        """Reset execution metrics (useful for testing)"""
        self._execution_count = 0
        self._success_count = 0
        self._failure_count = 0
        self._reply_failure_count = 0
        self._total_execution_time = 0.0
        logger.info("Execution metrics reset")
