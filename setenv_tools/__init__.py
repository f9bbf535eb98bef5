"""Export KEY=VALUE environment definitions from env files."""
