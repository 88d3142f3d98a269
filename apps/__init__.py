"""Django apps of the Wisma Nusantara backend."""
