#!/usr/bin/env python3
"""
Simulate a GitHub webhook for local testing.

Usage:
    python scripts/simulate_webhook.py --team acme --event push --repo owner/repo
    python scripts/simulate_webhook.py --team acme --event issues --repo owner/repo
"""

import argparse
import hashlib
import hmac
import json
import os

import httpx


def push_payload(args: argparse.Namespace) -> dict:
    return {
        "ref": f"refs/heads/{args.branch}",
        "pusher": {"name": args.user, "email": f"{args.user}@example.com"},
        "repository": {"full_name": args.repo},
        "commits": [
            {
                "id": "abcdef1234567890abcdef1234567890abcdef12",
                "message": "Fix bug\n\nLonger description of the fix",
                "author": {"name": args.user, "email": f"{args.user}@example.com"},
                "committer": {"name": args.user, "email": f"{args.user}@example.com"},
            }
        ],
    }


def issues_payload(args: argparse.Namespace) -> dict:
    return {
        "action": "opened",
        "issue": {
            "number": 1,
            "title": "Something is broken",
            "html_url": f"https://github.com/{args.repo}/issues/1",
            "body": "Steps:\n1. Run\n2. Crash",
            "user": {"login": args.user},
        },
        "repository": {"full_name": args.repo},
    }


def main():
    parser = argparse.ArgumentParser(description="Simulate GitHub webhook")
    parser.add_argument("--url", default="http://localhost:8080/")
    parser.add_argument("--team", required=True, help="Chat team to relay to")
    parser.add_argument("--event", choices=["push", "issues"], default="push")
    parser.add_argument("--repo", required=True, help="Repository (owner/repo)")
    parser.add_argument("--branch", default="main", help="Branch name")
    parser.add_argument("--user", default="octocat", help="Pusher / issue author")
    parser.add_argument(
        "--secret", default=None, help="Webhook secret (or use GITHUB_WEBHOOK_SECRET env)"
    )

    args = parser.parse_args()

    payload = push_payload(args) if args.event == "push" else issues_payload(args)
    payload_bytes = json.dumps(payload).encode()

    headers = {"Content-Type": "application/json", "X-GitHub-Event": args.event}
    secret = args.secret or os.environ.get("GITHUB_WEBHOOK_SECRET")
    if secret:
        digest = hmac.new(secret.encode("utf-8"), payload_bytes, hashlib.sha256).hexdigest()
        headers["X-Hub-Signature-256"] = f"sha256={digest}"

    print(f"Sending {args.event} webhook to {args.url}")
    print(f"Payload: {json.dumps(payload, indent=2)}")

    response = httpx.post(
        args.url, params={"team": args.team}, content=payload_bytes, headers=headers
    )

    print(f"\nResponse status: {response.status_code}")
    print(f"Response body: {response.json()}")

    return 0 if response.status_code == 200 else 1


if __name__ == "__main__":
    exit(main())
