"""
Sample command modules loaded at boot.

Every public module here is imported by termcore.interface.loader and may
export COMMAND / COMMANDS or a register(registry) hook.
"""
