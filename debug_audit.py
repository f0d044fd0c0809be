import asyncio
import os
import sys

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "backend")))

from agentic_maintainer.services.audit_runner import AuditRunner
from agentic_maintainer.services.pdf_generator import PdfGenerator

async def main():
    url = sys.argv[1] if len(sys.argv) > 1 else "https://example.com/"
    print(f"Running audit for {url}...")

    runner = AuditRunner()
    try:
        result = await runner.run(url)

        print(f"Status code: {result.status_code}")
        print(f"Response time: {result.response_time_ms} ms")
        print(f"Words: {result.word_count}, headings: {result.headings}")
        print(f"Links sampled: {result.link_sample_size}, broken: {len(result.broken_links)}")

        print(f"Checks count: {len(result.checks)}")
        for check in result.checks:
            print(f"  {check.id}: {check.status}")

        print(f"Tasks count: {len(result.tasks)}")
        if result.tasks:
            print(f"First task: {result.tasks[0]}")

        print("Generating PDF...")
        generator = PdfGenerator()
        pdf_bytes = generator.generate(result)
        print(f"PDF generated: {len(pdf_bytes)} bytes")
        with open("debug_report.pdf", "wb") as f:
            f.write(pdf_bytes)
        print("Saved debug_report.pdf")

    except Exception as e:
        print(f"Exception during run: {e}")
        import traceback
        traceback.print_exc()

if __name__ == "__main__":
    asyncio.run(main())
