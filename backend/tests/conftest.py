from __future__ import annotations

import pytest
from graphql import build_schema

HASURA_SDL = """
scalar uuid

enum role_enum {
  admin
  member
}

type Query {
  users: [users!]!
}

type Mutation {
  insert_users(objects: [users_insert_input!]!): users_mutation_response
  update_users_by_pk(pk_columns: users_pk_columns_input!, _set: users_set_input): users
  delete_users(where: String): users_mutation_response
}

type users {
  id: uuid!
  email: String!
  nickname: String
  role: role_enum!
  tags: [String!]
  scores: [Int]!
  created_by: String
  votes_aggregate_total: Int
  posts: [posts!]!
  posts_aggregate: posts_aggregate!
  profile: profiles
}

type posts {
  id: Int!
  title: String!
}

type posts_aggregate {
  count: Int!
}

type profiles {
  bio: String
}

type users_mutation_response {
  affected_rows: Int!
}

input posts_arr_rel_insert_input {
  data: [String!]!
}

input users_insert_input {
  email: String
  nickname: String
  role: role_enum
  created_by: String
  posts: posts_arr_rel_insert_input
}

input users_set_input {
  email: String
  nickname: String
}

input users_pk_columns_input {
  id: uuid!
}
"""

USER_SDL = """
type Query {
  user: [user!]!
}

type user {
  id: ID!
  name: String
  roles: [String!]!
}

input user_insert_input {
  name: String
}
"""

CAMEL_SDL = """
type Query {
  blogPost: [blogPost!]!
}

type Mutation {
  deleteBlogPost(id: Int!): blogPost
}

type blogPost {
  id: Int!
  title: String
}

input blogPostInsertInput {
  title: String
}

input blogPostSetInput {
  title: String
}

input blogPostPkColumnsInput {
  id: Int!
}
"""


@pytest.fixture
def hasura_schema():
    return build_schema(HASURA_SDL)


@pytest.fixture
def user_schema():
    return build_schema(USER_SDL)


@pytest.fixture
def camel_schema():
    return build_schema(CAMEL_SDL)
