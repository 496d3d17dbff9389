"""AI Crop Helper: a phone-sized farming assistant demo built on pygame."""
