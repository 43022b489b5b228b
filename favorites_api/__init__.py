"""Per-user favorites over a shared catalog of charts, insights, and audiences."""
