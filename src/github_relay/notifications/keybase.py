"""Keybase chat integration through the ``keybase chat api`` command."""

import asyncio
import json
import logging

from github_relay.notifications.base import ChatSendError

logger = logging.getLogger(__name__)


class KeybaseChatSender:
    """Send team messages with the keybase CLI's JSON API."""

    def __init__(self, command: str = "keybase", channel: str = "github"):
        self.command = command
        self.channel = channel

    def build_request(self, team: str, message: str) -> dict:
        return {
            "method": "send",
            "params": {
                "options": {
                    "channel": {
                        "name": team,
                        "members_type": "team",
                        "topic_name": self.channel,
                    },
                    "message": {"body": message},
                },
            },
        }

    async def send(self, team: str, message: str) -> None:
        """
        Send a message to a channel of a keybase team.

        Args:
            team: Keybase team name
            message: Message body

        Raises:
            ChatSendError: keybase could not be run or rejected the message
        """
        request = json.dumps(self.build_request(team, message)).encode("utf-8")

        try:
            process = await asyncio.create_subprocess_exec(
                self.command,
                "chat",
                "api",
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise ChatSendError(f"could not run {self.command}: {e}") from e

        stdout, stderr = await process.communicate(request)

        if process.returncode != 0:
            error_msg = stderr.decode("utf-8", errors="replace").strip()
            raise ChatSendError(f"keybase exited with {process.returncode}: {error_msg}")

        try:
            reply = json.loads(stdout)
        except json.JSONDecodeError as e:
            raise ChatSendError(f"unexpected reply from keybase: {e}") from e

        error = reply.get("error") if isinstance(reply, dict) else None
        if error:
            detail = error.get("message", error) if isinstance(error, dict) else error
            raise ChatSendError(f"keybase rejected message: {detail}")

        logger.info(f"Keybase message sent to {team}#{self.channel}")
