"""RealmHub API package."""
