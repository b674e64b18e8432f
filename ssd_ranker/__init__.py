"""pcshop.ge SSD 単価ランキング."""
