import argparse
import asyncio
import mimetypes
import os

from dotenv import load_dotenv

from drive_browser.config import DriveConfig
from drive_browser.core.exceptions import ConfigurationError, RequestError
from drive_browser.infrastructure.drive_client import GoogleDriveClient

# Load environment variables from .env file
load_dotenv()


async def run(client: GoogleDriveClient, args: argparse.Namespace) -> None:
    if args.command == "search":
        records = await client.search(args.term.strip())
        if not records:
            print("No results found.")
        for record in records:
            print(f"{record.id}\t{record.name}\t{record.mime_type or ''}")

    elif args.command == "upload":
        with open(args.path, "rb") as f:
            content = f.read()
        content_type = mimetypes.guess_type(args.path)[0] or "application/octet-stream"
        file_name = os.path.basename(args.path)

        uploaded = await client.upload(content, content_type)
        # Media uploads are created as "Untitled"
        await client.rename(uploaded.id, file_name)
        print(f"Uploaded {file_name} as {uploaded.id}")

    elif args.command == "rename":
        await client.rename(args.file_id, args.name.strip())
        print(f"Renamed {args.file_id} to {args.name.strip()}")

    elif args.command == "delete":
        await client.delete(args.file_id)
        print(f"Deleted {args.file_id}")


def main():
    parser = argparse.ArgumentParser(description="Manage Google Drive files.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search_parser = subparsers.add_parser("search", help="Search files by name.")
    search_parser.add_argument("term", type=str, help="Text the file name contains.")

    upload_parser = subparsers.add_parser("upload", help="Upload a local file.")
    upload_parser.add_argument("path", type=str, help="Path to the file.")

    rename_parser = subparsers.add_parser("rename", help="Rename a file.")
    rename_parser.add_argument("file_id", type=str, help="Drive file ID.")
    rename_parser.add_argument("name", type=str, help="New file name.")

    delete_parser = subparsers.add_parser("delete", help="Delete a file.")
    delete_parser.add_argument("file_id", type=str, help="Drive file ID.")

    args = parser.parse_args()

    config = DriveConfig.from_env()
    try:
        config.validate()
    except ConfigurationError as e:
        print(f"Error: {e}. Add it to your .env file.")
        return

    try:
        asyncio.run(run(GoogleDriveClient(config), args))
    except FileNotFoundError:
        print(f"Error: The file '{args.path}' was not found.")
    except RequestError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
