"""Place for passes over IR modules; it holds none yet."""