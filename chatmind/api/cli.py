"""
Interactive terminal adapter for ChatMind.

Architectural role:
- Exposes one conversation in the terminal.
- Delegates all message understanding to `chatmind.core.engine.ChatSession`.

Request lifecycle (per user turn, CLI):
1. Read stdin.
2. Handle local control commands (`exit`/`quit`, `clear chat`, `/depth`, `/level`).
3. Route normal text to `ChatSession.process_message`.
4. Print the reply.

Input validation behavior:
- Empty input is ignored.
- `/depth` validates the requested value against `PreferredDepth`.

Error handling strategy:
- EOF and keyboard interrupts terminate the loop without traceback output.
- The engine never raises; replies are printed as returned.

Side effects:
- Optionally downloads the NLTK tagger model when `NLTK_AUTO_DOWNLOAD=true`.
- Writes to stdout.
"""

from dotenv import load_dotenv

load_dotenv()

import asyncio
import logging
import os
import sys

from chatmind.core.analysis_types import PreferredDepth
from chatmind.core.engine import ChatSession
from chatmind.nlp.lexical_analyzer import ensure_nltk_resources


DEBUG = os.getenv("DEBUG") == "true"
NLTK_AUTO_DOWNLOAD = os.getenv("NLTK_AUTO_DOWNLOAD") == "true"

DEPTH_USAGE = "Usage: /depth <" + "|".join(d.value for d in PreferredDepth) + ">"


# =========================================================
# UTF-8 SAFE OUTPUT
# =========================================================

if hasattr(sys.stdout, "reconfigure"):
    try:
        sys.stdout.reconfigure(encoding="utf-8", errors="ignore")
    except (AttributeError, ValueError, OSError):
        pass


# =========================================================
# LOCAL COMMANDS
# =========================================================

def handle_command(session: ChatSession, text: str) -> str | None:
    """
    Run a local control command.

    Returns the text to print, or `None` when `text` is not a command and should be
    sent to the engine.
    """
    lowered = text.lower()

    if lowered in ("empty chat", "clear chat"):
        session.reset()
        return "Chat cleared."

    if lowered.startswith("/depth"):
        parts = lowered.split()
        if len(parts) != 2:
            return f"{DEPTH_USAGE}\nCurrent depth: {session.context.preferred_depth.value}"
        try:
            depth = PreferredDepth(parts[1])
        except ValueError:
            return f"Unknown depth '{parts[1]}'.\n{DEPTH_USAGE}"
        session.context.set_preferred_depth(depth)
        return f"Preferred depth set to: {depth.value}"

    if lowered == "/level":
        ctx = session.context
        return (
            f"Expertise level: {ctx.expertise_level().value}\n"
            f"Communication style: {ctx.communication_style.value}\n"
            f"Session topics: {', '.join(ctx.get_topics()) or '-'}"
        )

    return None


# =========================================================
# MAIN
# =========================================================

def main():
    """
    Run the interactive loop.

    Error handling strategy:
    - EOF/interrupt end the session without stack traces.
    """
    logging.basicConfig(level=logging.DEBUG if DEBUG else logging.WARNING)

    if NLTK_AUTO_DOWNLOAD:
        ensure_nltk_resources(download=True)

    session = ChatSession.from_env()
    mode = "remote + local fallback" if session.remote is not None else "local only"

    print("Tobi AI started. (Type 'exit' to quit)")
    print(f"Mode: {mode}")
    print("-" * 60)

    # One loop for the whole conversation; turns are run on it one at a time.
    loop = asyncio.new_event_loop()

    try:
        while True:

            try:
                question = input("You: ").strip()

            except EOFError:
                print("\nSession ended (EOF received).")
                break

            except KeyboardInterrupt:
                print("\nOperation cancelled by user.")
                break

            if not question:
                continue

            if question.lower() in ("exit", "quit"):
                print("Shutting down.")
                break

            command_output = handle_command(session, question)
            if command_output is not None:
                print(f"\n{command_output}\n")
                continue

            response = loop.run_until_complete(session.process_message(question))

            print(f"\nTobi: {response}")
            print("\n" + "-" * 60 + "\n")

    finally:
        loop.close()


if __name__ == "__main__":
    main()
