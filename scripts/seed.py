"""Populate a development database and print a bearer token for the first user."""
import argparse
import asyncio
import random
import time

from blogapi.database import Base, async_session, engine
from blogapi.models import Blog, BlogCategory, BlogTag, Category, Comment, Draft, Like, Tag, User
from blogapi.security import create_access_token, hash_password

TAGS = ["python", "fastapi", "postgresql", "docker", "kubernetes", "react",
        "typescript", "aws", "devops", "testing", "performance", "security"]
CATEGORIES = ["Tutorials", "Opinion", "News", "Release Notes", "Case Studies"]


async def seed(small: bool = False, password: str = "password123"):
    num_users = 5 if small else 25
    blogs_per_user = 4 if small else 40

    print(f"Seeding: {num_users} users, {num_users * blogs_per_user} blogs")
    start = time.perf_counter()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        tags = [Tag(name=name) for name in TAGS]
        categories = [Category(name=name) for name in CATEGORIES]
        # One hash for everyone; pbkdf2 is deliberately slow.
        password_hash = hash_password(password)
        users = [
            User(name=f"User {i}", email=f"user_{i:03d}@example.com", password_hash=password_hash)
            for i in range(num_users)
        ]
        session.add_all([*tags, *categories, *users])
        await session.flush()
        print(f"  Created {len(tags)} tags, {len(categories)} categories, {len(users)} users")

        blogs = []
        for user in users:
            for i in range(blogs_per_user):
                topic = random.choice(TAGS)
                blogs.append(Blog(
                    title=f"{topic.title()} notes #{i}",
                    content=f"Everything I learned about {topic} this week. " * 10,
                    published=random.random() > 0.2,
                    author_id=user.id,
                ))
        session.add_all(blogs)
        await session.flush()
        print(f"  Created {len(blogs)} blogs")

        for blog in blogs:
            for tag in random.sample(tags, k=random.randint(1, 3)):
                session.add(BlogTag(blog_id=blog.id, tag_id=tag.id))
            session.add(BlogCategory(blog_id=blog.id, category_id=random.choice(categories).id))
            session.add(Draft(blog_id=blog.id, created_by_id=blog.author_id,
                              content=f"Draft revision of '{blog.title}'"))
            for reader in random.sample(users, k=min(3, len(users))):
                session.add(Comment(blog_id=blog.id, user_id=reader.id,
                                    content=f"Thanks for writing about {blog.title}!"))
                if random.random() > 0.5:
                    session.add(Like(blog_id=blog.id, user_id=reader.id))
        await session.commit()

    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s")
    print(f"  Bearer token for {users[0].email}: {create_access_token(users[0].id)}")


def main():
    parser = argparse.ArgumentParser(description="Seed the blog database")
    parser.add_argument("--small", action="store_true", help="Use a small dataset")
    parser.add_argument("--password", default="password123", help="Password for every seeded user")
    args = parser.parse_args()
    asyncio.run(seed(small=args.small, password=args.password))


if __name__ == "__main__":
    main()
