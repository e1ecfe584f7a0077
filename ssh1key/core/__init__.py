"""Core building blocks: codecs, ciphers, loaders and serializers."""
