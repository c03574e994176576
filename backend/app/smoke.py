"""Posts one chat turn per topic to a running server and prints the generated questions."""
import argparse
import sys
from typing import Dict, List, Sequence

import requests

BACKEND_URL = "http://127.0.0.1:8000"
DEFAULT_TOPICS = ["React", "Python", "Cybersecurity"]


def chat_turn(base_url: str, topic: str, email: str = "test@example.com") -> Dict:
    payload = {
        "email": email,
        "message": "I am ready for the interview",
        "context": {"mode": "topic", "skill": topic},
        "isFirst": False,
    }
    r = requests.post(f"{base_url}/interview/chat", json=payload, timeout=60)
    r.raise_for_status()
    return r.json()


def run(base_url: str, topics: Sequence[str]) -> List[str]:
    failures = []
    for topic in topics:
        print(f"\n--- Topic: {topic} ---")
        try:
            data = chat_turn(base_url, topic)
        except requests.RequestException as e:
            print(f"Error calling endpoint: {e}")
            failures.append(topic)
            continue
        print(f"Generated Question: {data.get('reply')}")
    return failures


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--url", default=BACKEND_URL)
    parser.add_argument("topics", nargs="*", default=DEFAULT_TOPICS)
    args = parser.parse_args(argv)
    return 1 if run(args.url.rstrip("/"), args.topics) else 0


if __name__ == "__main__":
    sys.exit(main())
