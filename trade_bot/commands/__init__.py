"""
Command pattern implementation for the trade bot.

This module separates platform event handling from the trade workflow,
so commands can run against fake invocations and sessions in tests.
"""
