"""
GlobeAssist - CLI Entry Point.

    python main.py serve                      Run the API server
    python main.py "<job title>" "<company>"  Resolve one apply link
    python main.py                            Chat with the assistant
"""

import asyncio
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from globeassist.agents.apply_link import create_apply_link_resolver
from globeassist.agents.chat_assistant import create_chat_assistant
from globeassist.config import settings
from globeassist.models import InvalidJobError


def resolve_link(title: str, company: str, location: str | None = None) -> int:
    """Resolve and print the apply link for one job."""
    resolver = create_apply_link_resolver()
    try:
        result = resolver.resolve({"title": title, "company": company, "location": location})
    except InvalidJobError as e:
        print(f"Error: {e}")
        return 1

    print(f"[{result.source}] {result.link}")
    return 0


def chat_loop() -> None:
    """Interactive chat with the GlobeAssist assistant."""
    assistant = create_chat_assistant()
    resolver = create_apply_link_resolver()
    messages: list[dict] = []

    print("Commands: /quit, /apply <title> @ <company>")
    print("-" * 40)

    async def reply(content: str) -> str:
        messages.append({"role": "user", "content": content})
        parts = []
        async for piece in assistant.stream_reply(messages):
            print(piece, end="", flush=True)
            parts.append(piece)
        print()
        text = "".join(parts)
        messages.append({"role": "assistant", "content": text})
        return text

    while True:
        try:
            user_input = input("You: ").strip()
            if not user_input:
                continue

            if user_input.lower() == "/quit":
                break

            if user_input.startswith("/apply "):
                title, _, company = user_input[7:].partition("@")
                try:
                    result = resolver.resolve({"title": title, "company": company})
                    print(f"Apply: {result.link}\n")
                except InvalidJobError:
                    print("Usage: /apply <title> @ <company>\n")
                continue

            print("\nAssistant: ", end="")
            asyncio.run(reply(user_input))
            print()

        except KeyboardInterrupt:
            break

    print("Goodbye!")


def main():
    """Run the GlobeAssist CLI."""
    logging.basicConfig(level=settings.log_level)
    args = sys.argv[1:]

    if args and args[0] == "serve":
        import uvicorn

        uvicorn.run("globeassist.api.app:app", host="0.0.0.0", port=8000)
        return

    if len(args) >= 2:
        sys.exit(resolve_link(args[0], args[1], args[2] if len(args) > 2 else None))

    if args:
        print(__doc__)
        sys.exit(2)

    print("GlobeAssist")
    print("=" * 40)
    chat_loop()


if __name__ == "__main__":
    main()
