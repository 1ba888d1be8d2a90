"""Named, shareable countdown timers"""
