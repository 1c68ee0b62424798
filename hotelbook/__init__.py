"""Hotel booking API: accounts, hotels, room types and room availability."""
