#!/usr/bin/env python3
"""
Daily Habits CLI - Check off today's habits and sync them to Notion
"""
import logging
from typing import Optional

from habitsync.core.config import settings
from habitsync.views.controller import TrackerController

HELP_TEXT = """Commands:
  add <habit>      Add a habit (max 15)
  <n> | toggle <n> Check or uncheck habit n
  delete <n>       Remove habit n
  reset            Uncheck every habit
  notes <text>     Replace today's notes
  sync             Save today to Notion
  reload           Load today from Notion again
  help             Show this help
  quit             Leave"""


def parse_position(argument: str) -> Optional[int]:
    """Turn a 1-based habit number into a list index"""
    try:
        position = int(argument)
    except ValueError:
        return None
    return position - 1 if position > 0 else None


def call_command(controller: TrackerController, user_input: str) -> bool:
    """
    Route one line of input to the matching controller action

    Args:
        controller: The session's controller
        user_input: Raw line typed by the user

    Returns:
        False when the user asked to quit, True otherwise
    """
    command, _, text = user_input.lstrip().partition(" ")
    command = command.lower()
    argument = text.strip()

    if command in ("quit", "exit", "q"):
        return False

    if command.isdigit():
        argument, command = command, "toggle"

    if command == "add":
        controller.add_habit(argument)
    elif command in ("toggle", "delete"):
        index = parse_position(argument)
        if index is None:
            print(f"❌ Usage: {command} <habit number>")
        elif command == "toggle":
            controller.toggle_habit(index)
        else:
            controller.delete_habit(index)
    elif command == "reset":
        controller.reset_day()
    elif command == "notes":
        controller.edit_notes(text)
    elif command == "sync":
        controller.sync()
    elif command == "reload":
        controller.load()
    elif command == "help":
        print(HELP_TEXT)
    else:
        print(f"❌ Unknown command: {command}. Type 'help' for commands.")
    return True


def main():
    """Main CLI loop"""
    logging.basicConfig(level=logging.WARNING)

    print("🗓️  Daily Habits")
    print(f"Connected to: {settings.API_BASE_URL}")
    print("Type 'help' for commands, 'quit' to leave\n")

    controller = TrackerController()
    controller.load()
    print(controller.render())

    while True:
        try:
            user_input = input("\n> ")

            if not user_input.strip():
                print(controller.render())
                continue

            if not call_command(controller, user_input):
                print("👋 See you tomorrow!")
                break

            print(controller.render())

        except (KeyboardInterrupt, EOFError):
            print("\n👋 See you tomorrow!")
            break


if __name__ == "__main__":
    main()
