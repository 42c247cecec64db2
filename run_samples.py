# run_samples.py

import sys
import os
import json
import subprocess
from glob import glob

DEFAULT_COMMAND = f"{sys.executable} -m snowcut.main"


def command_for(base_command, input_file):
    if input_file.endswith(".in.json"):
        return base_command.split() + ["--format", "json"]
    return base_command.split()


def expected_output_path(input_file):
    stem = input_file.rsplit(".in.", 1)[0]
    return f"{stem}.out.json"


def run_test(command, input_file):
    """Runs a single test case and compares its output to the expected output."""

    expected_output_file = expected_output_path(input_file)
    if not os.path.exists(expected_output_file):
        print(f"SKIP: No matching output file for {os.path.basename(input_file)}")
        return "skip", 0

    with open(input_file, 'r') as f_in, open(expected_output_file, 'r') as f_out:
        input_data = f_in.read()
        try:
            expected_output = json.load(f_out)
        except json.JSONDecodeError:
            print(f"FAIL: Invalid JSON in {os.path.basename(expected_output_file)}")
            return "fail", 1

    try:
        process = subprocess.Popen(
            command_for(command, input_file),
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True
        )
        stdout, stderr = process.communicate(input_data, timeout=5)

        if process.returncode != 0:
            print(f"FAIL: {os.path.basename(input_file)}")
            print(f"   - Process exited with code {process.returncode}")
            print(f"   - Stderr: {stderr.strip()}")
            return "fail", 1

        try:
            actual_output = json.loads(stdout)
        except json.JSONDecodeError:
            print(f"FAIL: {os.path.basename(input_file)}")
            print(f"   - Program produced invalid JSON output.")
            print(f"   - Output: {stdout}")
            return "fail", 1

        # Expected files pin only the stable keys. Which sink is hit first and
        # the order of cut_edges depend on adjacency order, so they are left
        # out of samples whose input has more than one valid listing.
        mismatched = {
            key: actual_output.get(key)
            for key, value in expected_output.items()
            if actual_output.get(key) != value
        }
        if not mismatched:
            print(f"PASS: {os.path.basename(input_file)}")
            return "pass", 0
        else:
            print(f"FAIL: {os.path.basename(input_file)}")
            print("   - Expected:", json.dumps(expected_output))
            print("   - Actual:  ", json.dumps(actual_output))
            return "fail", 1

    except subprocess.TimeoutExpired:
        print(f"FAIL: {os.path.basename(input_file)} (Timeout > 5s)")
        process.kill()
        return "fail", 1
    except Exception as e:
        print(f"FAIL: {os.path.basename(input_file)} (Crashed)")
        print(f"   - Error: {e}")
        return "fail", 1


def main():
    if len(sys.argv) > 2:
        print("Usage: python run_samples.py [\"<snowcut_cmd>\"]")
        sys.exit(1)

    command = sys.argv[1] if len(sys.argv) == 2 else DEFAULT_COMMAND

    inputs = sorted(glob("samples/*.in.txt") + glob("samples/*.in.json"))

    total_failed = 0

    print("-" * 20)
    print(f"Running Cut Samples ({command})")
    print("-" * 20)
    if not inputs:
        print("No samples found in samples/")
    for f in inputs:
        _, failed_count = run_test(command, f)
        total_failed += failed_count

    print("\n" + "=" * 20)
    if total_failed == 0:
        print("All samples passed!")
    else:
        print(f"{total_failed} sample(s) failed.")
    print("=" * 20)

    sys.exit(total_failed)


if __name__ == "__main__":
    main()
