# scripts/test/submit_vehicle.py
"""Send a test vehicle to a running backend, through the HTML form or the JSON API."""

import argparse
import requests

BACKEND_URL = "http://127.0.0.1:8080"


def submit_form(base_url, vehicle):
    resp = requests.post(f"{base_url}/vehicles", data=vehicle, timeout=10)
    print(f"✅ Form POST plate={vehicle['plate']} → HTTP {resp.status_code} ({len(resp.text)} bytes of HTML)")


def submit_json(base_url, vehicle):
    resp = requests.post(f"{base_url}/api/v1/vehicles", json=vehicle, timeout=10)
    print(f"✅ JSON POST plate={vehicle['plate']} → HTTP {resp.status_code}: {resp.json()}")


def list_vehicles(base_url):
    resp = requests.get(f"{base_url}/api/v1/vehicles", timeout=10)
    resp.raise_for_status()
    for v in resp.json():
        print(f"   {v['id']:>4}  {v['plate']:<10} {v['make']:<12} {v['model']:<6} {v['color']:<6} {v['owner']}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Submit a vehicle for manual testing")
    parser.add_argument("--url", default=BACKEND_URL)
    parser.add_argument("--via", default="json", choices=["json", "form"])
    parser.add_argument("--plate", default="ABC123")
    parser.add_argument("--make", default="Toyota")
    parser.add_argument("--model", default="2015", help="manufacture year")
    parser.add_argument("--color", default="Red")
    parser.add_argument("--owner", default="Juan Perez")
    parser.add_argument("--list", action="store_true", help="print all vehicles afterwards")
    args = parser.parse_args()

    vehicle = {
        "plate": args.plate,
        "make": args.make,
        "model": args.model,
        "color": args.color,
        "owner": args.owner,
    }
    if args.via == "form":
        submit_form(args.url, vehicle)
    else:
        submit_json(args.url, vehicle)

    if args.list:
        list_vehicles(args.url)
