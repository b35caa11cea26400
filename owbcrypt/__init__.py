"""bcrypt password hashing and crypt(3)-style salt generation in pure Python."""

__version__ = "1.0.0"