#!/usr/bin/env python
"""
Session Driver — Tap Through the Console Against a Running Server

Creates a session and fires the same triggers a user would: cycle the
workflow steps, run the toolchain, flip validation, store snapshots.
Prints the rendered state after each screen.

Usage:
    uvicorn agentdeck.api.main:app
    python scripts/drive_session.py --runs 2 --taps 3
"""

import argparse
import os
import sys

import requests


# API Configuration
API_BASE_URL = os.environ.get("API_URL", "http://localhost:8000")


def _post(session_url: str, path: str) -> dict:
    response = requests.post(f"{session_url}{path}", timeout=5)
    response.raise_for_status()
    return response.json()


def drive(runs: int, taps: int, keep: bool) -> int:
    print("=" * 60)
    print("AGENT CONSOLE - SESSION DRIVER")
    print("=" * 60)
    print(f"Endpoint:   {API_BASE_URL}")
    print(f"Tool runs:  {runs}")
    print(f"Step taps:  {taps}")
    print("=" * 60)

    try:
        response = requests.post(f"{API_BASE_URL}/sessions", timeout=5)
        response.raise_for_status()
    except requests.exceptions.ConnectionError:
        print(f"[ERROR] Cannot connect to {API_BASE_URL}")
        print("       Make sure the backend is running: uvicorn agentdeck.api.main:app")
        return 1

    session_id = response.json()["session_id"]
    session_url = f"{API_BASE_URL}/sessions/{session_id}"
    print(f"\n[SESSION] {session_id}")

    # Workflow
    print("\n[1] WORKFLOW")
    for step in ("parse", "plan", "route", "execute"):
        for _ in range(taps):
            result = _post(session_url, f"/workflow/{step}/advance")
        print(f"   - {step:<8} {result['status']}")

    # Tooling
    print("\n[2] TOOLING")
    for _ in range(runs):
        _post(session_url, "/tooling/run")
    logs = requests.get(f"{session_url}/tooling/logs", timeout=5).json()
    for entry in logs["entries"]:
        print(f"   {entry['display']}")
    if logs["hint"]:
        print(f"   {logs['hint']}")

    # Validation
    print("\n[3] VALIDATION")
    validation = _post(session_url, "/validation/run")
    print(f"   Current Status: {validation['status']}")
    print(f"   Last run: {validation['last_run_label']}")

    # DataVault
    print("\n[4] DATAVAULT")
    vault = _post(session_url, "/datavault/snapshots")
    print(f"   Snapshots: {vault['snapshots']}")
    print(f"   Memory:    {vault['memory_label']}")
    print(f"   Last Sync: {vault['last_sync_label']}")

    if not keep:
        requests.delete(session_url, timeout=5).raise_for_status()
        print(f"\n[CLEANUP] Session {session_id} deleted")

    print("\n" + "=" * 60)
    print("[COMPLETE]")
    print("=" * 60)
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Drive a console session against a running Agent Console API"
    )
    parser.add_argument(
        "--runs", "-r",
        type=int,
        default=1,
        help="Number of toolchain runs (default: 1)"
    )
    parser.add_argument(
        "--taps", "-t",
        type=int,
        default=1,
        help="Status taps per workflow step (default: 1)"
    )
    parser.add_argument(
        "--keep",
        action="store_true",
        help="Keep the session instead of deleting it at the end"
    )

    args = parser.parse_args()
    sys.exit(drive(runs=args.runs, taps=max(args.taps, 1), keep=args.keep))


if __name__ == "__main__":
    main()
