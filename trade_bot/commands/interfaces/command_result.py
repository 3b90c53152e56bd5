from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class CommandStatus(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class CommandResult:
    """
    Outcome of a single command execution.

    `reply_content` is the terminal reply delivered to the invoker; the
    executor sends it exactly once.
    """

    status: CommandStatus
    invocation_id: str
    command_name: str
    reply_content: str
    execution_time_ms: float = 0.0
    data: Optional[Dict[str, Any]] = None
    error_message: Optional[str] = None
    error_details: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def success(
        cls,
        invocation_id: str,
        command_name: str,
        reply_content: str,
        execution_time_ms: float = 0.0,
        data: Optional[Dict[str, Any]] = None,
    ) -> "CommandResult":
        return cls(
            status=CommandStatus.SUCCESS,
            invocation_id=invocation_id,
            command_name=command_name,
            reply_content=reply_content,
            execution_time_ms=execution_time_ms,
            data=data,
        )

    @classmethod
    def failure(
        cls,
        invocation_id: str,
        command_name: str,
        reply_content: str,
        error_message: str,
        execution_time_ms: float = 0.0,
        error_details: Optional[Dict[str, Any]] = None,
    ) -> "CommandResult":
        return cls(
            status=CommandStatus.FAILURE,
            invocation_id=invocation_id,
            command_name=command_name,
            reply_content=reply_content,
            execution_time_ms=execution_time_ms,
            error_message=error_message,
            error_details=error_details or {},
        )

    def is_success(self) -> bool:
        return self.status == CommandStatus.SUCCESS

    def is_failure(self) -> bool:
        return self.status == CommandStatus.FAILURE
