"""
Stylesheet generation for the brand theme.
"""

from __future__ import annotations

from string import Template

THEME_TEMPLATE = Template("""@import "tailwindcss";
@import "tw-animate-css";

@custom-variant dark (&:is(.dark *));

@theme inline {
  --color-background: var(--background);
  --color-foreground: var(--foreground);
  --font-sans: var(--font-sans);
  --font-mono: var(--font-geist-mono);
  --color-ring: var(--ring);
  --color-input: var(--input);
  --color-border: var(--border);
  --color-destructive: var(--destructive);
  --color-accent-foreground: var(--accent-foreground);
  --color-accent: var(--accent);
  --color-muted-foreground: var(--muted-foreground);
  --color-muted: var(--muted);
  --color-secondary-foreground: var(--secondary-foreground);
  --color-secondary: var(--secondary);
  --color-primary-foreground: var(--primary-foreground);
  --color-primary: var(--primary);
  --color-popover-foreground: var(--popover-foreground);
  --color-popover: var(--popover);
  --color-card-foreground: var(--card-foreground);
  --color-card: var(--card);
}

:root {
  --background: #FFFFFF;
  --foreground: #333333;
  --card: #FFFFFF;
  --card-foreground: #333333;
  --popover: #FFFFFF;
  --popover-foreground: #333333;
  --primary: $primary;
  --primary-foreground: #FFFFFF;
  --secondary: #F5F5F5;
  --secondary-foreground: #333333;
  --muted: #F5F5F5;
  --muted-foreground: #666666;
  --accent: $accent;
  --accent-foreground: #FFFFFF;
  --destructive: #EF4444;
  --border: #E5E5E5;
  --input: #E5E5E5;
  --ring: $primary;
}

@layer base {
  * {
    @apply border-border outline-ring/50;
  }
  body {
    @apply bg-background text-foreground;
    font-family: 'Open Sans', sans-serif;
  }
  h1, h2, h3, h4, h5, h6 {
    font-family: 'Montserrat', sans-serif;
  }
}

/* Animations */
@keyframes hero-fade-up {
  from { opacity: 0; transform: translateY(20px); }
  to { opacity: 1; transform: translateY(0); }
}

.hero-fade-up {
  animation: hero-fade-up 600ms cubic-bezier(0.215, 0.61, 0.355, 1) both;
}

@keyframes gentle-float {
  0%, 100% { transform: translateY(0); }
  50% { transform: translateY(6px); }
}

.animate-gentle-float {
  animation: gentle-float 2s ease-in-out infinite;
}

@media (prefers-reduced-motion: reduce) {
  .hero-fade-up, .animate-gentle-float {
    animation: none;
    opacity: 1;
    transform: none;
  }
}
""")


def render_theme(primary_color: str, accent_color: str) -> str:
    """
    Render the global stylesheet for a color pair.

    Colors are inserted verbatim; callers pass values that already passed
    config validation.

    Args:
        primary_color: ``#RRGGBB`` used for ``--primary`` and ``--ring``.
        accent_color: ``#RRGGBB`` used for ``--accent``.

    Returns:
        The complete ``globals.css`` text.
    """
    return THEME_TEMPLATE.substitute(primary=primary_color, accent=accent_color)
