#!/usr/bin/env python3
"""
Test data tool: wipe test clients and reseed them through the backend's remote functions
"""

import os
import sys
import asyncio
import argparse
from dotenv import load_dotenv

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from config.settings import ConfigurationError, TEST_DATA_FUNCTIONS, require_supabase_settings
from services.test_data_service import TestDataService, TestDataError


async def run(functions) -> int:
    try:
        url, key = require_supabase_settings()
    except ConfigurationError as e:
        print(f"❌ {e}")
        return 2

    print(f"🚀 Running {len(functions)} remote function(s) against {url}")
    service = TestDataService(url, key, functions=functions)

    try:
        completed = await service.insert_test_data()
    except TestDataError as e:
        print(f"❌ {e.function_name} failed: {e.message}")
        return 1

    for function_name in completed:
        print(f"✅ {function_name}")
    print("📋 Données de test insérées avec succès")
    return 0


def main():
    """Main CLI interface"""
    parser = argparse.ArgumentParser(description="Reset and reseed CRM test data")
    parser.add_argument(
        "--only",
        nargs="+",
        choices=TEST_DATA_FUNCTIONS,
        help="Run only these functions (still in the standard order)"
    )
    args = parser.parse_args()

    load_dotenv()
    functions = [name for name in TEST_DATA_FUNCTIONS if not args.only or name in args.only]
    sys.exit(asyncio.run(run(functions)))


if __name__ == "__main__":
    main()
