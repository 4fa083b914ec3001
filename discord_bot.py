import asyncio
from typing import List

import discord

from cros_releases import ReleaseFetcher
from cros_releases.config import load_settings
from cros_releases.exceptions import ReleaseFetchError
from cros_releases.models import Release
from cros_releases.output import to_notifications

# Discord rejects messages longer than this.
MAX_MESSAGE_LENGTH = 2000

# Intents needed to read the "!releases" command.
intents = discord.Intents.default()
intents.message_content = True  # permission to read message contents

client = discord.Client(intents=intents)


def format_release_message(releases: List[Release]) -> str:
    """Notification-style digest: one heading and summary per release."""
    if not releases:
        return "No new ChromeOS releases found."

    response = "🔔 Latest ChromeOS releases\n\n"
    for note, release in zip(to_notifications(releases), releases):
        response += f"**{note.summary}**\n"
        response += f"*{release.title}*\n"
        if note.body:
            response += f"{note.body}\n"
        response += "\n"

    if len(response) > MAX_MESSAGE_LENGTH:
        response = response[: MAX_MESSAGE_LENGTH - 3] + "..."
    return response


@client.event
async def on_ready():
    """Called once the bot has logged in."""
    print(f"Logged in as {client.user}")


@client.event
async def on_message(message):
    """Answer the '!releases' command."""
    # Ignore the bot's own messages.
    if message.author == client.user:
        return

    if message.content.startswith("!releases"):
        await message.channel.send("Fetching the latest ChromeOS releases...")

        try:
            fetcher = ReleaseFetcher(releases=25, feed_url=load_settings().feed_url)
            # feedparser blocks; keep the event loop responsive.
            releases = (await asyncio.to_thread(fetcher.fetch))[:3]
            await message.channel.send(format_release_message(releases))
        except ReleaseFetchError as e:
            print(f"Release fetch error: {e}")
            await message.channel.send("Something went wrong while fetching releases.")


def main() -> None:
    token = load_settings().discord_token
    if not token:
        raise SystemExit("DISCORD_BOT_TOKEN is not set. Check your .env file.")
    client.run(token)


if __name__ == "__main__":
    main()
