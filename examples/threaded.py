"""Offloading hashing to a thread pool.

The KDF is CPU-bound and blocking; one StringHasher can be shared by
any number of worker threads.
"""

from concurrent.futures import ThreadPoolExecutor

from stringhasher import StringHasher

hasher = StringHasher({"saltLength": 16, "hashLength": 96}, algorithm="sha256")
passwords = [f"user-{i}-secret" for i in range(8)]

with ThreadPoolExecutor(max_workers=4) as pool:
    hashes = list(pool.map(hasher.generate, passwords))
    checks = list(pool.map(hasher.validate, passwords, hashes))

for pw, h, ok in zip(passwords, hashes, checks):
    print(f"{pw:16} {h[:24]}... {ok}")
