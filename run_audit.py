import httpx
import sys

API_BASE = "http://localhost:8000/api/v1"
TARGET_URL = sys.argv[1] if len(sys.argv) > 1 else "https://example.com/"

def run_audit():
    print(f"Starting audit for {TARGET_URL}...")
    try:
        print("Sending POST request to run audit...")
        resp = httpx.post(f"{API_BASE}/audit", json={"url": TARGET_URL}, timeout=60.0)
        if resp.status_code == 400:
            print(f"Rejected: {resp.json().get('detail')}")
            return
        resp.raise_for_status()
        report = resp.json()

        print(f"Status: {report['statusCode']} in {report['responseTimeMs']} ms")
        print(f"Generated at: {report['generatedAt']}")

        print("\nChecks:")
        for check in report["checks"]:
            print(f"  [{check['status'].upper():4}] {check['label']}: {check['details']}")

        print("\nTasks:")
        for task in report["tasks"]:
            print(f"  ({task['priority']}) {task['title']} - {task['description']}")

        for insight in report["insights"]:
            print(f"\n* {insight['message']}")

        # Download PDF
        print("\nDownloading PDF...")
        pdf_resp = httpx.post(f"{API_BASE}/audit/pdf", json={"url": TARGET_URL}, timeout=60.0)
        pdf_resp.raise_for_status()

        filename = "maintenance_audit.pdf"
        with open(filename, "wb") as f:
            f.write(pdf_resp.content)
        print(f"PDF saved to {filename}")

    except httpx.HTTPError as e:
        print(f"Error: {e}")

if __name__ == "__main__":
    run_audit()
