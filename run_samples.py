import argparse
import json
import shlex
import subprocess
import sys


NETWORK_SAMPLE = {
    "nodes": 4,
    "edges": [
        {"from": 0, "to": 1, "cap": 3},
        {"from": 0, "to": 2, "cap": 2},
        {"from": 1, "to": 3, "cap": 4},
        {"from": 2, "to": 3, "cap": 2},
    ],
    "source": 0,
    "sink": 3,
}


def run_command(command: str, payload: dict) -> dict:
    cmd = shlex.split(command)
    proc = subprocess.run(
        cmd,
        input=json.dumps(payload).encode("utf-8"),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        check=True,
    )
    return json.loads(proc.stdout.decode("utf-8"))


def main():
    parser = argparse.ArgumentParser(description="Run the sample network through a max-flow CLI.")
    parser.add_argument("solver_cmd", help="Command to execute the solver CLI.")
    args = parser.parse_args()

    output = run_command(args.solver_cmd, NETWORK_SAMPLE)
    json.dump(output, sys.stdout, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
