"""
Example: Follow a Build Log
============================================

Runs a command, and every few seconds posts whatever it has written to
its log file since the last post.  The caller owns the offset: it is only
advanced after a post succeeds, and calls are never overlapped.

Run with:
    GITHUB_TOKEN=... GITHUB_REPOSITORY=owner/name \
        python follow_build.py 42 build.log -- make all
"""

import os
import subprocess
import sys
import time

try:
    import issuelog
except ImportError:
    print("Please install issuelog to run this example: `pip install issuelog`")
    exit(1)

INTERVAL = 10  # seconds


def follow(issue: int, log_path: str, cmd):
    client = issuelog.GitHubCommentClient.from_env()
    offset = 0

    with open(log_path, "wb") as log:
        proc = subprocess.Popen(cmd, stdout=log, stderr=subprocess.STDOUT)
        while True:
            done = proc.poll() is not None
            if os.path.getsize(log_path) == offset:
                if done:
                    break
                time.sleep(INTERVAL)
                continue
            try:
                offset = issuelog.upload_result(client, issue, log_path, offset, True)
            except issuelog.ContentTooLargeError as exc:
                print(f"Stopping: {exc}")
                proc.terminate()
                break
            except issuelog.PostFailedError as exc:
                print(f"Post failed, retrying next round: {exc}")
            if done:
                break
            time.sleep(INTERVAL)

    return proc.wait()


if __name__ == "__main__":
    if len(sys.argv) < 4 or "--" not in sys.argv:
        print(__doc__)
        exit(1)
    split = sys.argv.index("--")
    exit(follow(int(sys.argv[1]), sys.argv[2], sys.argv[split + 1:]))
