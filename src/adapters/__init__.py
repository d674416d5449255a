"""Adaptadores concretos: httpx para el trace, pyperclip para el portapapeles."""
