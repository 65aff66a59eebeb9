# Domain Value Objects
from .command import Command, CommandInfo, Role, classify, command_name
from .payload import Payload

__all__ = ["Command", "CommandInfo", "Role", "classify", "command_name", "Payload"]
