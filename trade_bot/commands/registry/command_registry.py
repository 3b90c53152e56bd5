from typing import Any, Dict, List, Optional, Type
import logging
from trade_bot.commands.interfaces.command import Command
from trade_bot.commands.interfaces.command_context import CommandContext


logger = logging.getLogger(__name__)


class CommandRegistry:
    """
    Registry of the slash commands the bot exposes.

    The registry creates command instances for the executor and describes
    every registered command so the Discord adapter can declare them to
    the platform.

    Usage:
        registry = CommandRegistry()
        context = CommandContext(...)
        command = registry.create_command("trade", context)
        result = await command.execute(context)
    """

    def __init__(self, command_classes: Optional[List[Type[Command]]] = None):
        """
        Initialize command registry.

        Args:
            command_classes: Command classes to register. Defaults to the
                built-in commands.
        """
        logger.info("Initializing CommandRegistry")

        # Registry of command classes keyed by command name
        self._command_classes: Dict[str, Type[Command]] = {}

        if command_classes is None:
            self._setup_commands()
        else:
            for command_class in command_classes:
                self._register_command_class(command_class)

        logger.info(
            f"Registered {len(self._command_classes)} command classes: "
            f"{list(self._command_classes.keys())}"
        )

    def _setup_commands(self) -> None:
        """Register the built-in command classes"""
        # Imported here to avoid a circular import through the impl package
        from trade_bot.commands.impl.trade_command import TradeCommand

        self._register_command_class(TradeCommand)

    def _register_command_class(self, command_class: Type[Command]) -> None:
        """Register a command class in the registry"""
        # Create temporary instance to get command name
        temp_instance = command_class()
        command_name = temp_instance.get_command_name()

        if command_name in self._command_classes:
            logger.warning(f"Command '{command_name}' already registered, overriding")

        self._command_classes[command_name] = command_class
        logger.debug(f"Registered command class: {command_name}")

    def create_command(self, command_name: str, context: CommandContext) -> Command:
        """
        Create a command instance for the given context.

        Args:
            command_name: Name of the command to create
            context: Context that will be used for execution (for validation)

        Returns:
            Command instance

        Raises:
            ValueError: If command_name is not registered or the context is
                rejected by the command
            TypeError: If context is not a CommandContext
        """
        if command_name not in self._command_classes:
            available_commands = list(self._command_classes.keys())
            raise ValueError(
                f"Command '{command_name}' not found. Available commands: {available_commands}"
            )

        if not isinstance(context, CommandContext):
            raise TypeError("context must be a CommandContext instance")

        command = self._command_classes[command_name]()

        if not command.validate_context(context):
            raise ValueError(
                f"Context validation failed for command '{command_name}'"
            )

        logger.debug(f"Created command instance: {command_name}")
        return command

    def get_available_commands(self) -> List[str]:
        """
        Get list of all registered command names.

        Returns:
            List of available command names
        """
        return list(self._command_classes.keys())

    def get_command_info(self, command_name: str) -> Dict[str, Any]:
        """
        Get information about a specific command.

        Raises:
            ValueError: If command_name is not registered
        """
        if command_name not in self._command_classes:
            raise ValueError(f"Command '{command_name}' not found")

        command_class = self._command_classes[command_name]
        temp_instance = command_class()

        return {
            "name": command_name,
            "class": command_class.__name__,
            "description": temp_instance.get_description(),
            "options": temp_instance.get_options(),
            "supports_retry": temp_instance.supports_retry(),
        }

    def get_command_schemas(self) -> List[Dict[str, Any]]:
        """
        Describe every registered command for platform registration.

        Each schema has the command name, description and its required
        string options as a list of name/description pairs.
        """
        schemas = []
        for command_name, command_class in self._command_classes.items():
            temp_instance = command_class()
            schemas.append(
                {
                    "name": command_name,
                    "description": temp_instance.get_description(),
                    "options": [
                        {"name": name, "description": description, "required": True}
                        for name, description in temp_instance.get_options().items()
                    ],
                }
            )
        return schemas
