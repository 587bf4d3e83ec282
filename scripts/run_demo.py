#!/usr/bin/env python3
"""
Run a demo against a live Matomo instance.

Demonstrates:
1. Immediate calls through the façades
2. The same calls queued in one batch and sent as a single bulk request
3. Per-call failures inside a batch

Connection settings come from MATOMO_URL, MATOMO_AUTH_TOKEN and
MATOMO_DEFAULT_SITE_ID, or from the flags below.
"""

import argparse
import asyncio
import json
import time
from datetime import datetime
from pathlib import Path

from matomo_client import MatomoConfig, MatomoError, ReportingClient
from matomo_client.cli import setup_logging


class DemoRunner:
    """Runs the demonstration and collects results."""

    def __init__(self, config: MatomoConfig, site_id: int):
        self.config = config
        self.site_id = site_id
        self.results = {
            "timestamp": datetime.now().isoformat(),
            "matomo_url": config.base_url,
            "site_id": site_id,
            "tests": [],
        }

    def record(self, name: str, passed: bool, **details) -> None:
        self.results["tests"].append({"name": name, "passed": passed, **details})
        print(f"  [{'PASS' if passed else 'FAIL'}] {name}")

    async def immediate_calls(self, client: ReportingClient) -> dict:
        print("1. Immediate calls")
        started = time.perf_counter()
        version = await client.api.get_matomo_version()
        visits = await client.visits_summary.get_visits(self.site_id, "day", "yesterday")
        level = await client.tour.get_level()
        elapsed = time.perf_counter() - started

        self.record(
            "immediate_calls",
            True,
            requests=3,
            seconds=round(elapsed, 3),
            matomo_version=version,
        )
        return {"version": version, "visits": visits, "level": level}

    async def batched_calls(self, client: ReportingClient, expected: dict) -> None:
        print("2. Batched calls")
        batch = client.prepare_requests()
        version = batch.api.get_matomo_version()
        visits = batch.visits_summary.get_visits(self.site_id, "day", "yesterday")
        level = batch.tour.get_level()

        started = time.perf_counter()
        await batch.execute()
        elapsed = time.perf_counter() - started

        same = [version.result(), visits.result(), level.result()] == [
            expected["version"], expected["visits"], expected["level"],
        ]
        self.record(
            "batched_calls_match_immediate",
            same,
            requests=1,
            seconds=round(elapsed, 3),
            batch=batch.to_dict(),
        )

    async def per_call_failure(self, client: ReportingClient) -> None:
        print("3. Per-call failure inside a batch")
        batch = client.prepare_requests()
        ok = batch.tour.get_challenges()
        broken = batch.add_request("SitesManager.getSiteFromId", {"idSite": 999999})
        await batch.execute()

        error = broken.exception()
        self.record(
            "failure_isolated",
            ok.exception() is None and error is not None,
            error=str(error) if error else None,
        )

    async def run(self) -> dict:
        async with ReportingClient(self.config) as client:
            try:
                expected = await self.immediate_calls(client)
                await self.batched_calls(client, expected)
                await self.per_call_failure(client)
            except MatomoError as e:
                self.record("demo_aborted", False, error=str(e))
        return self.results


def main() -> None:
    parser = argparse.ArgumentParser(description="Matomo client demo")
    parser.add_argument("--url", help="Matomo base URL")
    parser.add_argument("--token", help="API token_auth")
    parser.add_argument("--site-id", type=int, default=1, help="Site to report on (default: 1)")
    parser.add_argument("--output", default="demo_results.json", help="Results file")
    args = parser.parse_args()

    overrides = {}
    if args.url:
        overrides["url"] = args.url
    if args.token:
        overrides["auth_token"] = args.token
    config = MatomoConfig(**overrides)

    setup_logging("WARNING")
    results = asyncio.run(DemoRunner(config, args.site_id).run())

    Path(args.output).write_text(json.dumps(results, indent=2, default=str))
    passed = sum(1 for test in results["tests"] if test["passed"])
    print(f"\n{passed}/{len(results['tests'])} checks passed, results in {args.output}")


if __name__ == "__main__":
    main()
