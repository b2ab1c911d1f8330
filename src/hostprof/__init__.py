"""hostprof - profiling session coordinator for an extension host worker."""
