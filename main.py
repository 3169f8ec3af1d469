"""
Company News Board - Main Entry Point

Fetches headlines for a company and its competitors, splits them by
keyword sentiment and US/global locality, and prints the board.
"""

import argparse
import logging
import sys
from colorama import init, Fore
from dotenv import load_dotenv

from newsboard.config import load_config, load_competitors_csv
from newsboard.pipeline import run_board
from newsboard.quotes import MockQuoteSource
from newsboard.render import render_board

# Load environment variables
load_dotenv()

# Initialize colorama for colored terminal output
init(autoreset=True)


def print_banner():
    """Print application banner."""
    print(Fore.CYAN + "=" * 70)
    print(Fore.CYAN + "  📰 COMPANY NEWS BOARD")
    print(Fore.CYAN + "  Headlines, Sentiment & Competitors")
    print(Fore.CYAN + "=" * 70)
    print()


def main():
    """Main application entry point."""
    parser = argparse.ArgumentParser(
        description='Company News Board - Headlines by sentiment, locality and competitor'
    )

    parser.add_argument(
        '--company',
        type=str,
        default=None,
        help='Company display name used as the news query (default: from config, Microsoft)'
    )

    parser.add_argument(
        '--symbol',
        type=str,
        default=None,
        help='Company ticker symbol (default: from config, MSFT)'
    )

    parser.add_argument(
        '--competitors',
        type=str,
        default=None,
        help='CSV file with name,ticker columns (overrides config competitors)'
    )

    parser.add_argument(
        '--config',
        type=str,
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )

    parser.add_argument(
        '--no-quotes',
        action='store_true',
        help='Skip the (mock) stock quote regions'
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for the mock quote generator'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    try:
        print_banner()

        config = load_config(args.config)
        config = config.with_primary(args.company, args.symbol)
        if args.competitors:
            config = config.with_competitors(load_competitors_csv(args.competitors))

        print(f"{Fore.YELLOW}📡 Fetching news...")
        print(f"   Company: {config.primary.display_name} ({config.primary.ticker or '-'})")
        print(f"   Competitors: {', '.join(c.display_name for c in config.competitors) or '-'}")
        print()

        quote_source = None if args.no_quotes else MockQuoteSource(seed=args.seed)
        result = run_board(config, quote_source=quote_source)

        print(render_board(result, company=config.primary.display_name, show_quotes=not args.no_quotes))
        print(f"\n{Fore.CYAN}✨ Done!")

    except FileNotFoundError as e:
        print(f"{Fore.RED}❌ File not found: {e}")
        sys.exit(1)

    except Exception as e:
        print(f"{Fore.RED}❌ Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    main()
