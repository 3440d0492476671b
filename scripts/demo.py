#!/usr/bin/env python3
"""
Demo script for the file serving endpoints.

This script calls a running server and shows how each delivery strategy
behaves: cached buffer, streamed transform and synthetic stream.

Start the server first:
    file-serving
"""

import time

import httpx

from file_serving.config import settings

BASE_URL = f"http://localhost:{settings.api_port}"


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demo_buffer(client: httpx.Client) -> None:
    """Demonstrate the cached buffer endpoint."""
    print_section("Cached Buffer (GET /buffer)")

    print("\n📦 First request reads the file, later ones hit memory:")
    for attempt in range(1, 4):
        start = time.time()
        response = client.get("/buffer")
        duration = (time.time() - start) * 1000
        print(f"  #{attempt}: {response.status_code}, {len(response.content)} bytes, {duration:.2f}ms")

    print(f"\n  Cached: {client.get('/health').json()['buffer_cached']}")


def demo_stream(client: httpx.Client) -> None:
    """Demonstrate the streamed transform endpoint."""
    print_section("Streamed Transform (GET /stream)")

    with client.stream("GET", "/stream") as response:
        print(f"\n  Status: {response.status_code}")
        print(f"  Content-Type: {response.headers['content-type']}")
        chunks = list(response.iter_text())

    print(f"  Chunks received: {len(chunks)}")
    print("\n🔠 Body:")
    for line in "".join(chunks).splitlines():
        print(f"  {line}")


def demo_large_stream(client: httpx.Client) -> None:
    """Demonstrate the synthetic stream endpoint."""
    print_section("Synthetic Stream (GET /large-stream)")

    start = time.time()
    first_byte_ms = None
    lines = 0
    last_line = ""

    with client.stream("GET", "/large-stream") as response:
        for line in response.iter_lines():
            if first_byte_ms is None:
                first_byte_ms = (time.time() - start) * 1000
            lines += 1
            last_line = line

    total_ms = (time.time() - start) * 1000
    print(f"\n  Lines: {lines}")
    print(f"  Last line: {last_line}")
    print(f"  Time to first line: {first_byte_ms or 0:.2f}ms")
    print(f"  Total time: {total_ms:.2f}ms")


def main() -> None:
    """Run all demos."""
    print("\n🚀 File Serving Demo")
    print("=" * 70)
    print("Three ways to deliver a file: buffer, stream transform, synthetic stream")

    try:
        with httpx.Client(base_url=BASE_URL) as client:
            demo_buffer(client)
            demo_stream(client)
            demo_large_stream(client)

        print("\n" + "=" * 70)
        print("✅ Demo completed successfully!")
        print("=" * 70)

    except httpx.HTTPError as e:
        print(f"\n❌ Error: {e}")
        print("\nMake sure the server is running:")
        print("  file-serving")


if __name__ == "__main__":
    main()
