"""
app/cli.py

Command-line chat interface.
- Reads a city name (Hebrew or English) per line
- Answers with the current weather or a localized error message
- 'clear' forgets the transcript, 'exit'/'quit' leaves

Environment:
- LOG_LEVEL: logging level for provider diagnostics (default WARNING here)
"""

import os

from util.logs import setup_logging
from weatherchat.service import get_weather
from weatherchat.session import Session


def main():
    """Run the interactive CLI loop."""
    setup_logging(os.getenv("LOG_LEVEL", "WARNING"))
    print("Weather Chat (type 'exit' to quit)\n")
    sess = Session()
    while True:
        try:
            raw = input("You: ")
        except EOFError:
            print()
            break
        # Sanitize pasted scripts: remove repeated "You:" tokens and excess whitespace
        user = raw.replace("You:", "").replace("you:", "").replace("YOU:", "").strip()
        if not user:
            continue
        if user.lower() in {"exit", "quit"}:
            print("Bye!")
            break
        if user.lower() == "clear":
            sess.clear()
            print("Assistant: (conversation cleared)\n")
            continue

        sess.add("user", user)
        reply = get_weather(user)
        print(f"Assistant: {reply}\n")
        sess.add("assistant", reply)


if __name__ == "__main__":
    main()
