"""Server — ASGI request pipeline and pounce runners."""
