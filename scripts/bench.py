# scripts/bench.py

import argparse
import time

from cbcvault import AESCipher, decrypt, encrypt

BENCH_KEY = b"imwl8sot7u8zvdcr6wvbwcmhrwpfb3rs"
BENCH_IV = b"lgd73e8vc7ah52u9"


def measure(func, *args, iterations: int = 10000) -> float:
    """Returns mean seconds per call."""
    start = time.perf_counter()
    for _ in range(iterations):
        func(*args)
    return (time.perf_counter() - start) / iterations


def run(size: int, iterations: int) -> dict:
    data = b"A" * size
    cipher = AESCipher(BENCH_KEY, BENCH_IV)
    encrypted = cipher.encrypt(data)

    return {
        "encrypt (one-shot)": measure(encrypt, data, BENCH_KEY, BENCH_IV, iterations=iterations),
        "decrypt (one-shot)": measure(decrypt, encrypted, BENCH_KEY, BENCH_IV, iterations=iterations),
        "encrypt (handle)": measure(cipher.encrypt, data, iterations=iterations),
        "decrypt (handle)": measure(cipher.decrypt, encrypted, iterations=iterations),
    }


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description="Time AES-256-CBC encrypt/decrypt.")
    parser.add_argument("--size", type=int, default=1024, help="payload size in bytes")
    parser.add_argument("--iterations", type=int, default=10000)
    args = parser.parse_args()

    print(f"[*] Payload {args.size} bytes, {args.iterations} iterations per case")
    for name, seconds in run(args.size, args.iterations).items():
        print(f"{name:<20} {seconds * 1e6:10.2f} us/op")
