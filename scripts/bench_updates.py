#!/usr/bin/env python3
"""Benchmark concurrent page updates and check revision numbering.

Creates one page, sends --num-updates PATCH requests with distinct source
concurrently (--concurrency in flight), then verifies that the final
revisionCount equals the number of updates and that history counts are
0..N with no gaps or duplicates.

Usage:
    export API_URL=http://localhost:3000
    uv run python scripts/bench_updates.py [--num-updates 200] [--concurrency 20]
"""
from __future__ import annotations

import argparse
import asyncio
import os
import statistics
import sys
import time

import httpx


async def _patch(
    client: httpx.AsyncClient,
    sem: asyncio.Semaphore,
    short_id: str,
    i: int,
    latencies: list[float],
) -> bool:
    async with sem:
        t0 = time.perf_counter()
        r = await client.patch(
            f"/v1/data/{short_id}",
            json={"title": "bench", "source": f"edit {i}", "createdBy": f"bench-{i}"},
        )
        latencies.append(time.perf_counter() - t0)
        return r.status_code == 200


async def run(api_url: str, num_updates: int, concurrency: int) -> int:
    async with httpx.AsyncClient(base_url=api_url, timeout=60.0) as client:
        r = await client.post(
            "/v1/data", json={"title": "bench", "source": "initial", "createdBy": "bench"}
        )
        r.raise_for_status()
        short_id = r.json()["data"]["shortId"]
        print(f"Created page {short_id}; sending {num_updates} updates...")

        sem = asyncio.Semaphore(concurrency)
        latencies: list[float] = []
        start = time.perf_counter()
        results = await asyncio.gather(
            *(_patch(client, sem, short_id, i, latencies) for i in range(num_updates))
        )
        total = time.perf_counter() - start
        ok = sum(results)

        page = (await client.get(f"/v1/data/{short_id}")).json()["data"]
        history = (await client.post(f"/v1/data/{short_id}/history")).json()["data"]

    counts = sorted(item["revisionCount"] for item in history)
    sequential = counts == list(range(len(counts)))
    p50 = statistics.median(latencies) * 1000 if latencies else 0.0

    print(
        f"Update benchmark (n={num_updates}, ok={ok}, concurrency={concurrency})\n"
        f"  Throughput: {ok / total:.2f} updates/s\n"
        f"  Latency p50: {p50:.1f} ms\n"
        f"  Final revisionCount: {page['revisionCount']} (expected {ok})\n"
        f"  History entries: {len(history)} (expected {ok + 1}), sequential: {sequential}"
    )
    return 0 if sequential and page["revisionCount"] == ok else 1


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark concurrent page updates")
    parser.add_argument("--num-updates", type=int, default=100, help="Number of PATCH requests")
    parser.add_argument("--concurrency", type=int, default=10, help="Requests in flight")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:3000").rstrip("/")
    return asyncio.run(run(api_url, args.num_updates, args.concurrency))


if __name__ == "__main__":
    sys.exit(main())
