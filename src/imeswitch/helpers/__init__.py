# UI-agnostic helpers
