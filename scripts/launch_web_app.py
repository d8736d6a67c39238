#!/usr/bin/env python3
"""Launch the JSPEC portfolio web interface."""

import argparse
import sys

from jspec_portfolio.config import settings
from jspec_portfolio.utils.logging_config import configure_logging
from jspec_portfolio.web.app import launch_app


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Launch the JSPEC portfolio web interface"
    )

    parser.add_argument(
        '--share',
        action='store_true',
        help='Create a public share link (requires internet)'
    )

    parser.add_argument(
        '--port',
        type=int,
        default=settings.server_port,
        help=f'Port to run the server on (default: {settings.server_port})'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args()

    configure_logging("DEBUG" if args.debug or settings.debug else settings.log_level)

    print("""
    🏗️  JSPEC INDIA - Portfolio
    ==========================

    Starting web server...
    """)

    if args.share:
        print("📡 Creating public share link...")
    else:
        print(f"🌐 Local URL: http://localhost:{args.port}")

    print("\nPress Ctrl+C to stop the server\n")

    try:
        launch_app(share=args.share, port=args.port)
    except KeyboardInterrupt:
        print("\n\nServer stopped by user.")
    except Exception as e:
        print(f"\n❌ Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
