import argparse
import json
import logging
import os
import sys
from tabulate import tabulate
import config
from basesecret.entities import parse_request
from basesecret.errors import SecretSharingError
from shamir import find_secret

class SecretClient:
    def __init__(self, testcase_dir=None):
        self.testcase_dir = testcase_dir

    def testcase_path(self, case_id):
        if self.testcase_dir is None:
            return config.Config.testcase_path(case_id)
        return os.path.join(self.testcase_dir, config.Config.TESTCASE_PATTERN.format(case_id))

    def load_testcase(self, case_id):
        path = self.testcase_path(case_id)
        if not os.path.exists(path):
            raise FileNotFoundError(f"Test case {case_id} not found")
        return self.load_file(path)

    def load_file(self, path):
        with open(path, "r") as f:
            return json.load(f)

    def solve(self, json_data):
        return find_secret(json_data)

    def solve_file(self, path):
        return self.solve(self.load_file(path))

    def solve_testcase(self, case_id):
        return self.solve(self.load_testcase(case_id))

    def show_points(self, json_data):
        """Print each share next to its decoded value"""
        try:
            request = parse_request(json_data)
        except SecretSharingError as e:
            print(f"Cannot read shares: {e}")
            return
        rows = []
        for share in request.shares:
            try:
                decoded = share.to_point().y
            except SecretSharingError as e:
                decoded = f"invalid ({e})"
            rows.append([share.index, share.base, share.encoded_value, decoded])
        print(tabulate(rows, headers=["x", "Base", "Encoded", "Decoded y"], tablefmt="grid"))

    def show_result(self, result):
        if not result["success"]:
            print(f"\nReconstruction failed ({result['errorType']}): {result['error']}")
            return
        print("\nSecret successfully calculated")
        print(tabulate(
            [
                ["Total points (n)", result["n"]],
                ["Required (k)", result["k"]],
                ["Points used", result["pointsUsed"]],
                ["Secret", result["secret"]]
            ],
            tablefmt="grid"
        ))

def main_menu(client):
    while True:
        print("\n===== Base-Encoded Secret Reconstruction =====")
        print("1. Solve bundled test case")
        print("2. Solve JSON file")
        print("3. Exit")

        choice = input("> ")

        if choice == "1":
            case_id = input("Test case number: ")
            try:
                data = client.load_testcase(case_id)
            except FileNotFoundError as e:
                print(e)
                continue
            client.show_points(data)
            client.show_result(client.solve(data))
        elif choice == "2":
            path = input("Path to JSON file: ")
            try:
                data = client.load_file(path)
            except (OSError, json.JSONDecodeError) as e:
                print(f"Could not read {path}: {e}")
                continue
            client.show_points(data)
            client.show_result(client.solve(data))
        elif choice == "3":
            print("Exiting...")
            break
        else:
            print("Invalid choice")

def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Reconstruct a Shamir secret from base-encoded shares"
    )
    parser.add_argument("file", nargs="?", help="JSON request file")
    parser.add_argument("--testcase", help="solve a bundled test case by number")
    parser.add_argument(
        "--testcase-dir",
        help="directory holding testcase<N>.json files "
             f"(default: $BASESECRET_TESTCASE_DIR or {config.Config.TESTCASE_DIR})"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.Config.LOG_LEVEL, format=config.Config.LOG_FORMAT)
    client = SecretClient(args.testcase_dir)

    if args.file is None and args.testcase is None:
        main_menu(client)
        return 0

    try:
        if args.testcase is not None:
            data = client.load_testcase(args.testcase)
        else:
            data = client.load_file(args.file)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    client.show_points(data)
    result = client.solve(data)
    client.show_result(result)
    return 0 if result["success"] else 1

if __name__ == "__main__":
    sys.exit(main())
