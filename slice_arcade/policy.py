def policy(env):
    # Strategy: Drag the blade straight onto the lowest visible fruit, since it is the next
    # one to fall out of reach. Hits are only tested at the sampled pointer position, so
    # jumping across the screen is safe as long as the landing point is clear of every bomb.
    # With nothing safe to cut, release the button so no stray sample can touch a bomb.
    session = env.session
    bombs = [obj for obj in session.objects if obj.is_bomb]

    best = None
    for obj in session.objects:
        if obj.is_bomb:
            continue
        if not (0 <= obj.x <= env.WIDTH and 0 <= obj.y <= env.HEIGHT):
            continue
        if any(bomb.contains(obj.x, obj.y) for bomb in bombs):
            continue
        if best is None or obj.y > best.y:
            best = obj

    if best is None:
        return [0.0, 0.0, 0.0]  # Release
    return [best.x, best.y, 1.0]  # Press / drag onto the fruit
