"""Body-stat based energy estimates."""
