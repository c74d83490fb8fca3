"""
Contract Deployment Wrapper
Runs scripts/deploy_contract.py
"""

import subprocess
import sys

if __name__ == "__main__":
    print("=" * 70, file=sys.stderr)
    print("Soulbound Contract Deployment", file=sys.stderr)
    print("=" * 70, file=sys.stderr)
    print(file=sys.stderr)

    # Run deployment script, forwarding arguments
    result = subprocess.run(
        [sys.executable, "-m", "scripts.deploy_contract", *sys.argv[1:]],
        cwd="."
    )

    sys.exit(result.returncode)
