"""Site-specific extractors that turn a page URL into stream data."""