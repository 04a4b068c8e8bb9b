"""stringhasher Quickstart — hash and verify a password."""

from stringhasher import StringHasher

# 1. Create a hasher (PBKDF2-HMAC-SHA512, 100k iterations, 128-char output)
hasher = StringHasher(signature="hash512")

# 2. Hash a password; every call uses a fresh salt
stored = hasher.generate("qwe123asd456!@#")
print(f"{len(stored)} chars: {stored}")

# 3. Verify
print("correct password:", hasher.validate("qwe123asd456!@#", stored))
print("wrong password:  ", hasher.validate("letmein", stored))

# 4. Inspect the layout
print(f"\nsignature={hasher.signature!r} derived={hasher.derived_length} salt={hasher.salt_length}")
