from blocks.site_counts.block import register, render_callback

__all__ = ["register", "render_callback"]
