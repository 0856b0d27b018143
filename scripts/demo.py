# scripts/demo.py

import datetime
import sys

from cbcvault import AESCipher, AESError, decrypt_text, encrypt

# Demo key material only. Never reuse a fixed key/IV for real data.
DEMO_KEY = b"imwl8sot7u8zvdcr6wvbwcmhrwpfb3rs"  # 32 bytes / 256 bits
DEMO_IV = b"lgd73e8vc7ah52u9"                   # 16 bytes / 128 bits


def run_demo():
    """Round-trips one timestamped message through the handle and the one-shot API."""
    now = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    message = f"AES-256-CBC test data, current time: {now}"

    print("--- Configuration ---")
    print("Mode: AES-256-CBC with PKCS7 padding")
    print(f"Key: {DEMO_KEY.decode()} (length: {len(DEMO_KEY)} bytes)")
    print(f"IV: {DEMO_IV.decode()} (length: {len(DEMO_IV)} bytes)")
    print(f"Plaintext: {message}")

    print("--- Handle mode ---")
    cipher = AESCipher(DEMO_KEY, DEMO_IV)
    encrypted = cipher.encrypt(message)
    print(f"Encrypted (Base64 standard): {encrypted}")
    print(f"Decrypted: {cipher.decrypt_text(encrypted)}")

    print("--- One-shot mode ---")
    encrypted = encrypt(message, DEMO_KEY, DEMO_IV)
    print(f"Encrypted (Base64 standard): {encrypted}")
    print(f"Decrypted: {decrypt_text(encrypted, DEMO_KEY, DEMO_IV)}")


if __name__ == '__main__':
    try:
        run_demo()
    except AESError as e:
        print(f"[ERROR] {e}")
        sys.exit(1)
    print("[SUCCESS] Both modes round-tripped.")
